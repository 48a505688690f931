# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


from unittest.mock import MagicMock, patch

import pytest
from click.testing import CliRunner

from werft_lib.client.job import JobStatus, Repository
from werft_lib.client.service import ListJobsResponse
from werft_lib.core.config import CFG
from werft_lib.core.error import WerftTransportError
from werft_lib.job import job_list
from werft_lib.properties.phase import JobPhase
from werft_lib.query.request import ListJobsRequest


@pytest.fixture
def sample_jobs():
    return [
        JobStatus(
            name="werft-build.3",
            owner="chris",
            repository=Repository(owner="32leaves", repo="werft"),
            phase=JobPhase.PHASE_DONE,
            success=True,
        ),
        JobStatus(
            name="werft-build.2",
            owner="alice",
            repository=Repository(owner="32leaves", repo="werft-ui"),
            phase=JobPhase.PHASE_RUNNING,
        ),
    ]


def _mock_service(response: ListJobsResponse | None = None) -> MagicMock:
    service = MagicMock()
    service.__enter__.return_value = service
    # do not suppress exceptions raised inside the `with` block
    service.__exit__.return_value = False
    service.listJobs.return_value = response or ListJobsResponse()
    return service


def test_job_list_default_request(sample_jobs):
    runner = CliRunner()
    service = _mock_service(ListJobsResponse(total=2, result=sample_jobs))

    with patch("werft_lib.job.cli.dial", return_value=service) as mock_dial:
        result = runner.invoke(job_list, [], catch_exceptions=False)

    assert result.exit_code == 0
    mock_dial.assert_called_once_with(None)
    service.listJobs.assert_called_once_with(
        ListJobsRequest.fromExpressions([], ["name:desc"], limit=50, offset=0)
    )
    service.__exit__.assert_called_once()


def test_job_list_renders_jobs_in_service_order(sample_jobs):
    runner = CliRunner()
    service = _mock_service(ListJobsResponse(total=2, result=sample_jobs))

    with patch("werft_lib.job.cli.dial", return_value=service):
        result = runner.invoke(job_list, [], catch_exceptions=False)

    lines = [line.split() for line in result.stdout.splitlines() if line.strip()]
    assert lines[0] == ["NAME", "OWNER", "REPO", "PHASE", "SUCCESS"]
    assert lines[1] == ["werft-build.3", "chris", "32leaves/werft", "done", "true"]
    assert lines[2] == [
        "werft-build.2",
        "alice",
        "32leaves/werft-ui",
        "running",
        "false",
    ]


def test_job_list_passes_filters_order_and_paging():
    runner = CliRunner()
    service = _mock_service()

    with patch("werft_lib.job.cli.dial", return_value=service):
        result = runner.invoke(
            job_list,
            [
                "phase==done",
                "success==true",
                "repo.repo|=werft",
                "--order",
                "created:asc",
                "--order",
                "name:desc",
                "--limit",
                "10",
                "--offset",
                "30",
            ],
            catch_exceptions=False,
        )

    assert result.exit_code == 0
    request = service.listJobs.call_args.args[0]
    assert request == ListJobsRequest.fromExpressions(
        ["phase==done", "success==true", "repo.repo|=werft"],
        ["created:asc", "name:desc"],
        limit=10,
        offset=30,
    )
    assert request.toDict()["filter"][1]["terms"][0]["value"] == "1"


@pytest.mark.parametrize(
    "args",
    [
        ["name"],
        ["phase==bogus"],
        ["==value"],
        ["--order", "nocolon"],
        ["--order", "a:b:c"],
        ["phase==done", "--order", "name:asc", "--order", "broken"],
    ],
)
def test_job_list_invalid_expressions_fail_before_dialing(args):
    runner = CliRunner()

    with patch("werft_lib.job.cli.dial") as mock_dial:
        result = runner.invoke(job_list, args, catch_exceptions=False)

    assert result.exit_code == CFG.exit_codes.default
    mock_dial.assert_not_called()


def test_job_list_negative_limit_is_usage_error():
    runner = CliRunner()

    with patch("werft_lib.job.cli.dial") as mock_dial:
        result = runner.invoke(job_list, ["--limit", "-1"])

    assert result.exit_code == 2
    mock_dial.assert_not_called()


def test_job_list_transport_error():
    runner = CliRunner()
    service = _mock_service()
    service.listJobs.side_effect = WerftTransportError("connection refused")

    with patch("werft_lib.job.cli.dial", return_value=service):
        result = runner.invoke(job_list, [], catch_exceptions=False)

    assert result.exit_code == CFG.exit_codes.transport
    service.__exit__.assert_called_once()


def test_job_list_unexpected_error():
    runner = CliRunner()
    service = _mock_service()
    service.listJobs.side_effect = RuntimeError("boom")

    with patch("werft_lib.job.cli.dial", return_value=service):
        result = runner.invoke(job_list, [], catch_exceptions=False)

    assert result.exit_code == CFG.exit_codes.unexpected_error
    service.__exit__.assert_called_once()


def test_job_list_no_jobs():
    runner = CliRunner()
    service = _mock_service(ListJobsResponse(total=0, result=[]))

    with patch("werft_lib.job.cli.dial", return_value=service):
        result = runner.invoke(job_list, ["owner==nobody"], catch_exceptions=False)

    assert result.exit_code == 0
    assert "NAME" not in result.stdout


def test_job_list_yaml(sample_jobs):
    runner = CliRunner()
    service = _mock_service(ListJobsResponse(total=2, result=sample_jobs))

    with patch("werft_lib.job.cli.dial", return_value=service):
        result = runner.invoke(job_list, ["--yaml"], catch_exceptions=False)

    assert result.exit_code == 0
    for job in sample_jobs:
        assert job.toYaml().strip() in result.stdout
    assert "SUCCESS" not in result.stdout


def test_job_list_help_lists_keys_and_operators():
    runner = CliRunner()
    result = runner.invoke(job_list, ["--help"])

    assert result.exit_code == 0
    for key in ["repo.owner", "repo.host", "success", "created", "trigger"]:
        assert key in result.output
    for marker in ["==", "~=", "|=", "=|"]:
        assert marker in result.output

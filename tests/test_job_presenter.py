# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


import re

import pytest
import yaml

from werft_lib.client.job import JobStatus, Repository
from werft_lib.job.presenter import CFG, JobListPresenter
from werft_lib.properties.phase import JobPhase

_ANSI = re.compile(r"\x1b\[[0-9;]*m")


def _strip(text: str) -> str:
    return _ANSI.sub("", text)


@pytest.fixture
def sample_jobs():
    return [
        JobStatus(
            name="werft-build.3",
            owner="chris",
            repository=Repository(host="github.com", owner="32leaves", repo="werft"),
            phase=JobPhase.PHASE_RUNNING,
            success=False,
        ),
        JobStatus(
            name="gitpod-build.41",
            owner="alice",
            repository=Repository(host="github.com", owner="gitpod-io", repo="gitpod"),
            phase=JobPhase.PHASE_DONE,
            success=True,
        ),
    ]


@pytest.mark.parametrize(
    "string,color,bold,expected_prefix",
    [
        ("test", "red", False, JobListPresenter.ANSI_COLORS["red"]),
        ("test", None, True, JobListPresenter.ANSI_COLORS["bold"]),
        (
            "test",
            "green",
            True,
            JobListPresenter.ANSI_COLORS["bold"] + JobListPresenter.ANSI_COLORS["green"],
        ),
    ],
)
def test_color_applies_correct_ansi(string, color, bold, expected_prefix):
    result = JobListPresenter._color(string, color=color, bold=bold)
    assert result == f"{expected_prefix}{string}{JobListPresenter.ANSI_COLORS['reset']}"


@pytest.mark.parametrize("color", [None, "default"])
def test_color_without_style_returns_plain_string(color):
    assert JobListPresenter._color("test", color=color) == "test"


def test_create_jobs_table_headers_and_rows(sample_jobs):
    table = _strip(JobListPresenter(sample_jobs).createJobsTable())
    lines = table.splitlines()

    assert lines[0].split() == ["NAME", "OWNER", "REPO", "PHASE", "SUCCESS"]
    assert lines[1].split() == [
        "werft-build.3",
        "chris",
        "32leaves/werft",
        "running",
        "false",
    ]
    assert lines[2].split() == [
        "gitpod-build.41",
        "alice",
        "gitpod-io/gitpod",
        "done",
        "true",
    ]
    assert len(lines) == 3


def test_create_jobs_table_columns_are_aligned(sample_jobs):
    lines = _strip(JobListPresenter(sample_jobs).createJobsTable()).splitlines()

    # every column starts at the same offset in all lines
    assert lines[0].index("OWNER") == lines[1].index("chris") == lines[2].index("alice")
    assert lines[0].index("PHASE") == lines[1].index("running") == lines[2].index("done")


def test_create_jobs_table_colors_phase(sample_jobs):
    table = JobListPresenter(sample_jobs).createJobsTable()

    assert JobListPresenter._color("running", JobPhase.PHASE_RUNNING.color) in table
    assert (
        JobListPresenter._color("true", CFG.job_list_presenter.success_style) in table
    )


def test_create_jobs_table_does_not_parse_numbers():
    job = JobStatus(name="0012", owner="1e3")
    table = _strip(JobListPresenter([job]).createJobsTable())

    assert "0012" in table
    assert "1e3" in table


def test_create_jobs_table_shows_total_when_truncated(sample_jobs):
    table = _strip(JobListPresenter(sample_jobs, total=10).createJobsTable())
    assert "Showing 2 of 10 jobs." in table


@pytest.mark.parametrize("total", [None, 2])
def test_create_jobs_table_no_total_note(sample_jobs, total):
    table = _strip(JobListPresenter(sample_jobs, total=total).createJobsTable())
    assert "Showing" not in table


def test_shorten_job_name():
    limit = CFG.job_list_presenter.max_job_name_length
    long_name = "x" * (limit + 5)

    assert JobListPresenter._shortenJobName(long_name) == "x" * limit + "…"
    assert JobListPresenter._shortenJobName("short") == "short"


def test_print_jobs(sample_jobs, capsys):
    JobListPresenter(sample_jobs).printJobs()
    out = _strip(capsys.readouterr().out)

    assert "werft-build.3" in out
    assert "gitpod-io/gitpod" in out


def test_dump_yaml(sample_jobs, capsys):
    JobListPresenter(sample_jobs).dumpYaml()
    out = capsys.readouterr().out

    for job in sample_jobs:
        assert job.toYaml().strip() in out

    documents = [yaml.safe_load(doc) for doc in out.split("\n\n") if doc.strip()]
    assert [doc["name"] for doc in documents] == ["werft-build.3", "gitpod-build.41"]

# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import click
from tabulate import Line, TableFormat, tabulate

from werft_lib.client.job import JobStatus
from werft_lib.core.config import CFG


class JobListPresenter:
    """
    Present a list of jobs returned by the werft service.
    """

    # Mapping of human-readable color names to ANSI escape codes.
    ANSI_COLORS = {
        # default
        "default": "",
        # standard colors
        "black": "\033[30m",
        "red": "\033[31m",
        "green": "\033[32m",
        "yellow": "\033[33m",
        "blue": "\033[34m",
        "magenta": "\033[35m",
        "cyan": "\033[36m",
        "white": "\033[37m",
        # bright colors
        "bright_black": "\033[90m",
        "bright_red": "\033[91m",
        "bright_green": "\033[92m",
        "bright_yellow": "\033[93m",
        "bright_blue": "\033[94m",
        "bright_magenta": "\033[95m",
        "bright_cyan": "\033[96m",
        "bright_white": "\033[97m",
        # other colors
        "grey70": "\033[38;5;249m",
        "grey50": "\033[38;5;244m",
        # bold:
        "bold": "\033[1m",
        # reset
        "reset": "\033[0m",
    }

    # Columns of the job table.
    HEADERS = ["NAME", "OWNER", "REPO", "PHASE", "SUCCESS"]

    # Table formatting configuration for `tabulate`.
    _COMPACT_TABLE = TableFormat(
        lineabove=Line("", "", "", ""),
        linebelowheader="",
        linebetweenrows="",
        linebelow=Line("", "", "", ""),
        headerrow=("", "   ", ""),
        datarow=("", "   ", ""),
        padding=0,
        with_header_hide=["lineabove", "linebelow"],
    )

    def __init__(self, jobs: list[JobStatus], total: int | None = None):
        """
        Initialize the presenter with a list of jobs.

        Args:
            jobs (list[JobStatus]): Jobs to present, in the order returned by the service.
            total (int | None): Total number of jobs matching the search.
                If larger than the number of presented jobs, a note is shown below the table.
        """
        self._jobs = jobs
        self._total = total

    def createJobsTable(self) -> str:
        """
        Build a compact tabulated string representation of the job list.

        Returns:
            str: Tabulated job information with ANSI color codes applied.
        """
        rows = [self._createJobRow(job) for job in self._jobs]

        table = tabulate(
            rows,
            headers=self._formatHeaders(),
            tablefmt=JobListPresenter._COMPACT_TABLE,
            stralign="left",
            disable_numparse=True,
        )

        if self._total is not None and self._total > len(self._jobs):
            table += "\n" + JobListPresenter._color(
                f"\nShowing {len(self._jobs)} of {self._total} jobs.", "grey50"
            )

        return table

    def printJobs(self) -> None:
        """
        Print the job table to stdout.

        Colors are removed automatically if stdout is not a terminal.
        """
        click.echo(self.createJobsTable())

    def dumpYaml(self) -> None:
        """
        Print the YAML representation of all jobs to stdout.
        """
        for job in self._jobs:
            click.echo(job.toYaml())

    def _createJobRow(self, job: JobStatus) -> list[str]:
        """
        Create a single row of job data.

        Args:
            job (JobStatus): Job to show information for.

        Returns:
            list[str]: List of formatted cell values.
        """
        return [
            JobListPresenter._mainColor(JobListPresenter._shortenJobName(job.name)),
            JobListPresenter._mainColor(job.owner),
            JobListPresenter._mainColor(str(job.repository)),
            JobListPresenter._color(str(job.phase), job.phase.color),
            JobListPresenter._formatSuccess(job.success),
        ]

    def _formatHeaders(self) -> list[str]:
        """
        Apply formatting to table headers.
        """
        return [
            JobListPresenter._color(
                header, color=CFG.job_list_presenter.headers_style, bold=True
            )
            for header in JobListPresenter.HEADERS
        ]

    @staticmethod
    def _formatSuccess(success: bool) -> str:
        if success:
            return JobListPresenter._color(
                "true", CFG.job_list_presenter.success_style
            )
        return JobListPresenter._color("false", CFG.job_list_presenter.failure_style)

    @staticmethod
    def _shortenJobName(job_name: str) -> str:
        """
        Truncate a job name if it exceeds the maximum allowed display length.

        Args:
            job_name (str): The original job name string.

        Returns:
            str: The possibly shortened job name. If the original name length is
                less than or equal to the configured limit, it is returned unchanged.
        """
        if len(job_name) > CFG.job_list_presenter.max_job_name_length:
            return f"{job_name[: CFG.job_list_presenter.max_job_name_length]}…"

        return job_name

    @staticmethod
    def _color(string: str, color: str | None = None, bold: bool = False) -> str:
        """
        Apply ANSI color codes and optional bold styling to a string.

        Args:
            string (str): The string to colorize.
            color (str | None): Optional color.
            bold (bool): Whether to apply bold formatting.

        Returns:
            str: ANSI-colored and optionally bolded string.
        """
        prefix = JobListPresenter.ANSI_COLORS["bold"] if bold else ""
        prefix += JobListPresenter.ANSI_COLORS[color] if color else ""
        if not prefix:
            return string

        return f"{prefix}{string}{JobListPresenter.ANSI_COLORS['reset']}"

    @staticmethod
    def _mainColor(string: str, bold: bool = False) -> str:
        """
        Apply the main presenter color with optional bold styling.
        """
        return JobListPresenter._color(string, CFG.job_list_presenter.main_style, bold)

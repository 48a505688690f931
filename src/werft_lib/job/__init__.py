# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Job inspection commands.

This module provides the `job` command group with the `list` command, which
searches for jobs on the werft service, and `JobListPresenter`, which formats
the returned jobs as a compact table or YAML.
"""

from .cli import create_job_group, job_list
from .presenter import JobListPresenter

__all__ = ["JobListPresenter", "create_job_group", "job_list"]

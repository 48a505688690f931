# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Client side of the werft service.

`JobService` is the abstract connection used by werft commands,
`HttpJobService` implements it on top of httpx, and `JobStatus` describes
a job returned by the service.
"""

from .http import HttpJobService, dial
from .job import JobStatus, Repository
from .service import JobService, ListJobsResponse

__all__ = [
    "HttpJobService",
    "JobService",
    "JobStatus",
    "ListJobsResponse",
    "Repository",
    "dial",
]

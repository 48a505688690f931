# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Enumerations describing werft jobs.

`JobPhase` is the lifecycle phase of a job; it is used both to validate
`phase` filter expressions and to color job listings. `JobTrigger` is the
event that started a job.
"""

from .phase import JobPhase, JobTrigger

__all__ = ["JobPhase", "JobTrigger"]

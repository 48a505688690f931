# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from dataclasses import dataclass, field
from typing import Any, Self

import yaml

from werft_lib.core.error import WerftTransportError
from werft_lib.properties.phase import JobPhase, JobTrigger


@dataclass(frozen=True)
class Repository:
    """Source repository a job was started for."""

    host: str = ""
    owner: str = ""
    repo: str = ""
    ref: str = ""

    def __str__(self) -> str:
        return f"{self.owner}/{self.repo}"


@dataclass(frozen=True)
class JobStatus:
    """
    Information about a single job as returned by the werft service.
    """

    name: str
    owner: str = ""
    repository: Repository = field(default_factory=Repository)
    trigger: JobTrigger = JobTrigger.TRIGGER_UNKNOWN
    created: str = ""
    phase: JobPhase = JobPhase.PHASE_UNKNOWN
    success: bool = False

    @classmethod
    def fromDict(cls, data: dict[str, Any]) -> Self:
        """
        Construct a JobStatus from the JSON representation sent by the werft service.

        Missing optional sections are replaced with empty defaults.

        Args:
            data (dict[str, Any]): Decoded JSON object describing a job.

        Returns:
            JobStatus: The decoded job.

        Raises:
            WerftTransportError: If the object is not a mapping or has no name.
        """
        if not isinstance(data, dict) or "name" not in data:
            raise WerftTransportError(f"Malformed job record received: {data!r}.")

        metadata = data.get("metadata") or {}
        repository = metadata.get("repository") or {}
        conditions = data.get("conditions") or {}

        return cls(
            name=data["name"],
            owner=metadata.get("owner", ""),
            repository=Repository(
                host=repository.get("host", ""),
                owner=repository.get("owner", ""),
                repo=repository.get("repo", ""),
                ref=repository.get("ref", ""),
            ),
            trigger=JobTrigger.fromStr(metadata.get("trigger", "")),
            created=metadata.get("created", ""),
            phase=JobPhase.fromStr(data.get("phase", "")),
            success=bool(conditions.get("success", False)),
        )

    def toDict(self) -> dict[str, Any]:
        """Return a flat, human-readable representation of the job."""
        return {
            "name": self.name,
            "owner": self.owner,
            "repository": {
                "host": self.repository.host,
                "owner": self.repository.owner,
                "repo": self.repository.repo,
                "ref": self.repository.ref,
            },
            "trigger": str(self.trigger),
            "created": self.created,
            "phase": str(self.phase),
            "success": self.success,
        }

    def toYaml(self) -> str:
        """Return the YAML representation of the job."""
        return yaml.safe_dump(
            self.toDict(), default_flow_style=False, sort_keys=False
        )

# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Self

from werft_lib.core.error import WerftTransportError
from werft_lib.query.request import ListJobsRequest

from .job import JobStatus


@dataclass(frozen=True)
class ListJobsResponse:
    """
    Response of the list jobs procedure.
    """

    # Total number of jobs matching the filter, regardless of limit and offset.
    total: int = 0
    # Jobs in the order returned by the service.
    result: list[JobStatus] = field(default_factory=list)

    @classmethod
    def fromDict(cls, data: dict[str, Any]) -> Self:
        """
        Construct the response from its decoded JSON representation.

        Raises:
            WerftTransportError: If the response is not a JSON object or its jobs are malformed.
        """
        if not isinstance(data, dict):
            raise WerftTransportError(f"Malformed response received: {data!r}.")

        try:
            total = int(data.get("total", 0))
        except (TypeError, ValueError) as e:
            raise WerftTransportError(
                f"Malformed job count received: {data.get('total')!r}."
            ) from e

        return cls(
            total=total,
            result=[JobStatus.fromDict(job) for job in data.get("result") or []],
        )


class JobService(ABC):
    """
    Abstract connection to the werft service.

    Implementations hold the underlying connection and must release it in `close`.
    Instances can be used as context managers which close the connection on exit.

    All methods should raise WerftTransportError when the remote call fails.
    """

    @abstractmethod
    def listJobs(self, request: ListJobsRequest) -> ListJobsResponse:
        """
        Search for jobs matching the request.

        Args:
            request (ListJobsRequest): Filter, order and paging of the search.

        Returns:
            ListJobsResponse: Matching jobs.

        Raises:
            WerftTransportError: If the remote call fails.
        """
        pass

    @abstractmethod
    def close(self) -> None:
        """
        Release the connection to the service.
        """
        pass

    def __enter__(self) -> Self:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

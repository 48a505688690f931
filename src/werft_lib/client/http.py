# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import os

import httpx

from werft_lib.core.config import CFG
from werft_lib.core.error import WerftTransportError
from werft_lib.core.logger import get_logger
from werft_lib.query.request import ListJobsRequest

from .service import JobService, ListJobsResponse

logger = get_logger(__name__)


class HttpJobService(JobService):
    """
    Connection to the werft service using JSON over HTTP.
    """

    def __init__(
        self,
        host: str,
        timeout: float = CFG.connection.timeout,
        transport: httpx.BaseTransport | None = None,
    ):
        """
        Open a connection to the werft service.

        Args:
            host (str): Address of the service, either `host:port` or a full URL.
            timeout (float): Timeout of a single remote call in seconds.
            transport (httpx.BaseTransport | None): Optional transport to use
                instead of the network one.
        """
        self._base_url = HttpJobService._toBaseUrl(host)
        self._client = httpx.Client(
            base_url=self._base_url, timeout=timeout, transport=transport
        )
        logger.debug(f"Connected to werft service at '{self._base_url}'.")

    def listJobs(self, request: ListJobsRequest) -> ListJobsResponse:
        payload = request.toDict()
        logger.debug(f"Sending list jobs request: {payload}.")

        try:
            response = self._client.post(CFG.connection.list_jobs_path, json=payload)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            raise WerftTransportError(
                f"Werft service at '{self._base_url}' rejected the request: {e.response.status_code} {e.response.text.strip()}"
            ) from e
        except httpx.HTTPError as e:
            raise WerftTransportError(
                f"Could not reach werft service at '{self._base_url}': {e}."
            ) from e
        except ValueError as e:
            raise WerftTransportError(
                f"Werft service at '{self._base_url}' returned an invalid response: {e}."
            ) from e

        return ListJobsResponse.fromDict(data)

    def close(self) -> None:
        self._client.close()
        logger.debug(f"Closed connection to werft service at '{self._base_url}'.")

    @staticmethod
    def _toBaseUrl(host: str) -> str:
        """
        Convert a service address into a base URL.

        Addresses without a scheme are assumed to use plain http.
        """
        if "://" in host:
            return host.rstrip("/")
        return f"http://{host}"


def dial(host: str | None = None) -> JobService:
    """
    Open a connection to the werft service.

    Args:
        host (str | None): Address of the service. If not provided, the address
            is taken from the environment variable or the configuration.

    Returns:
        JobService: Connected service. Must be closed by the caller.
    """
    host = host or os.environ.get(CFG.env_vars.host) or CFG.connection.host
    return HttpJobService(host)

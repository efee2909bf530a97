"""Shared HTTP client for upstream schedule APIs.

Handles raw HTTP requests. No data transformation - just fetch and
return JSON. Every call site states whether the request is required
(failures raise) or optional (failures are logged and yield None).
"""

import json
import logging
import threading
from enum import Enum

import httpx

from homegame.config import get_fetch_timeout
from homegame.core.exceptions import (
    UpstreamDecodeError,
    UpstreamHttpError,
    UpstreamTimeoutError,
)

logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {"accept": "application/json"}


class RequestPolicy(Enum):
    """What a failed request means to the caller."""

    REQUIRED = "required"  # raise UpstreamHttpError and subclasses
    OPTIONAL = "optional"  # log and return None


class HttpClient:
    """Low-level JSON client with a fixed per-request timeout.

    No retries: a failed request is reported once, per its policy.
    """

    def __init__(
        self,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        self._timeout = timeout if timeout is not None else get_fetch_timeout()
        self._transport = transport
        self._client: httpx.Client | None = None
        self._lock = threading.Lock()

    @property
    def timeout(self) -> float:
        return self._timeout

    def _get_client(self) -> httpx.Client:
        if self._client is None:
            with self._lock:
                # Double-check after acquiring lock
                if self._client is None:
                    self._client = httpx.Client(
                        timeout=self._timeout,
                        headers=DEFAULT_HEADERS,
                        transport=self._transport,
                    )
        return self._client

    def get_json(
        self,
        url: str,
        params: dict | None = None,
        *,
        policy: RequestPolicy = RequestPolicy.REQUIRED,
        empty_statuses: tuple[int, ...] = (),
    ) -> dict | None:
        """GET a JSON document.

        Args:
            url: Endpoint URL
            params: Query parameters
            policy: REQUIRED raises on any failure, OPTIONAL returns None
            empty_statuses: Status codes that mean "no data" (return None
                without raising, regardless of policy)

        Returns:
            Decoded JSON object, or None for an empty/optional failure

        Raises:
            UpstreamTimeoutError: Timed out (REQUIRED only)
            UpstreamHttpError: Transport error or non-2xx (REQUIRED only)
            UpstreamDecodeError: Body is not JSON (REQUIRED only)
        """
        try:
            response = self._get_client().get(url, params=params)
        except httpx.TimeoutException as e:
            return self._fail(policy, UpstreamTimeoutError(url, self._timeout), e)
        except httpx.RequestError as e:
            return self._fail(policy, UpstreamHttpError(url, None, f"Request failed for {url}: {e}"), e)

        if response.status_code in empty_statuses:
            logger.info("HTTP %s for %s, treating as empty", response.status_code, url)
            return None

        if not response.is_success:
            return self._fail(policy, UpstreamHttpError(url, response.status_code))

        try:
            return response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            return self._fail(policy, UpstreamDecodeError(url, response.status_code), e)

    def _fail(
        self,
        policy: RequestPolicy,
        error: UpstreamHttpError,
        cause: Exception | None = None,
    ) -> None:
        if policy is RequestPolicy.REQUIRED:
            raise error from cause
        logger.warning("Optional request degraded to empty: %s", error)
        return None

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client:
            self._client.close()
            self._client = None

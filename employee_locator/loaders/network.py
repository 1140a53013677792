"""
HTTP loader: a blocking GET that returns the response body as text.

Includes optional retry logic for connect, read and timeout failures using
tenacity. Retries are off by default; HTTP status errors are never retried.
"""

from __future__ import annotations

from typing import Optional

import httpx
from tenacity import Retrying, retry_if_exception_type, stop_after_attempt, wait_exponential

from employee_locator.config import get_settings
from employee_locator.errors import NetworkError
from employee_locator.loaders.abstract import AbstractDataLoader
from employee_locator.utils.logging import get_logger

log = get_logger(__name__)


class NetworkLoader(AbstractDataLoader):
    """
    Download an employee file over HTTP(S) with httpx.

    A fresh client is opened per `load()` call and closed before returning.

    Parameters
    ----------
    url : str
        Address to GET. Redirects are followed.
    timeout : float | None
        Seconds allowed for connect/read. Defaults to settings.request_timeout_seconds.
    retries : int | None
        Extra attempts after a transport failure. Defaults to settings.network_retries.
    transport : httpx.BaseTransport | None
        Custom transport, mainly for tests (httpx.MockTransport).
    """

    kind: str = "network"

    def __init__(
        self,
        url: str,
        timeout: Optional[float] = None,
        retries: Optional[int] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        super().__init__(url)
        self.url = url
        self.timeout = timeout if timeout is not None else get_settings().request_timeout_seconds
        self.retries = retries if retries is not None else get_settings().network_retries
        self._transport = transport

    def _fetch(self) -> httpx.Response:
        with httpx.Client(
            timeout=self.timeout,
            follow_redirects=True,
            transport=self._transport,
        ) as client:
            response = client.get(self.url)
            # Body is read eagerly by Client.get, so it survives the client closing.
            return response

    def load(self) -> str:
        log.debug(
            "Fetching URL",
            extra={"source": self.url, "timeout": self.timeout, "retries": self.retries},
        )
        retrying = Retrying(
            stop=stop_after_attempt(self.retries + 1),
            wait=wait_exponential(multiplier=1, min=1, max=10),
            retry=retry_if_exception_type((httpx.TimeoutException, httpx.NetworkError)),
            reraise=True,
        )
        try:
            response = retrying(self._fetch)
        except httpx.TimeoutException as exc:
            raise NetworkError(self.url, f"timed out after {self.timeout}s") from exc
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise NetworkError(self.url, str(exc) or type(exc).__name__) from exc
        except UnicodeError as exc:
            # Hostnames that fail IDNA encoding (idna.IDNAError subclasses UnicodeError).
            raise NetworkError(self.url, f"invalid hostname ({exc})") from exc

        if not response.is_success:
            raise NetworkError(
                self.url,
                f"HTTP {response.status_code} {response.reason_phrase}".strip(),
                status_code=response.status_code,
            )
        return response.text


__all__ = ["NetworkLoader"]

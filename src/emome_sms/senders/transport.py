"""HTTP transport for the IMSP servlet via httpx."""

import logging
from typing import Mapping, Protocol
from urllib.parse import urlencode

import httpx

from ..errors import TransportError

logger = logging.getLogger(__name__)

USER_AGENT = "Emome_IMSP_SMS"
DEFAULT_TIMEOUT = 30.0


class Transport(Protocol):
    """Callable that POSTs form fields and returns the raw body."""
    
    def __call__(self, url: str, fields: Mapping[str, str | bytes]) -> str: ...


class HttpxTransport:
    """
    POST form fields with httpx.
    
    Every key and value is URL-encoded into an
    application/x-www-form-urlencoded body. Failures of any kind are
    raised as TransportError; nothing is retried.
    
    Args:
        timeout: Overall request timeout, seconds
        connect_timeout: Connection timeout, seconds
        user_agent: User-Agent header value
        client: Optional shared httpx.Client (not closed by the transport)
    """
    
    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        connect_timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = USER_AGENT,
        client: httpx.Client | None = None,
    ):
        self.timeout = httpx.Timeout(timeout, connect=connect_timeout)
        self.user_agent = user_agent
        self._client = client
    
    def _post(self, client: httpx.Client, url: str, body: str) -> httpx.Response:
        return client.post(
            url,
            content=body,
            headers={
                "User-Agent": self.user_agent,
                "Content-Type": "application/x-www-form-urlencoded",
            },
            timeout=self.timeout,
        )
    
    def __call__(self, url: str, fields: Mapping[str, str | bytes]) -> str:
        body = urlencode(fields)
        
        try:
            if self._client is not None:
                response = self._post(self._client, url, body)
            else:
                with httpx.Client() as client:
                    response = self._post(client, url, body)
        except httpx.TimeoutException as e:
            raise TransportError(f"Request timeout: {e}") from e
        except httpx.HTTPError as e:
            raise TransportError(str(e)) from e
        
        if not response.is_success:
            raise TransportError(
                f"HTTP {response.status_code}: {response.text}",
                status_code=response.status_code,
            )
        
        return response.text

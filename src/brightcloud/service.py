"""BrightCloud web service client.

BrightCloudService builds the endpoint URL, signs the request, sends it
over httpx and decodes the XML body into result models. Errors from the
transport, the HTTP status and the decoder are surfaced to the caller;
nothing is retried or cached.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Optional, TypeVar
from urllib.parse import quote

import httpx

from brightcloud.auth.signer import RequestSigner
from brightcloud.core.config import ClientConfig, load_client_config
from brightcloud.core.constants import CATEGORIES_PATH, DEFAULTS, URIS_PATH
from brightcloud.core.exceptions import ServiceHTTPError, TransportError
from brightcloud.core.models import (
    CategoryInfo,
    Credential,
    HeartBeatResult,
    UrlLookupResult,
)
from brightcloud.core.utils import join_categories, validate_lookup_url
from brightcloud.decoder import (
    decode_categories,
    decode_heartbeat,
    decode_url_info,
    status_message,
)


logger = logging.getLogger(__name__)

T = TypeVar("T")


class BrightCloudService:
    """Client for the BrightCloud URL categorization web service.

    Use as an async context manager so the underlying connection pool
    is closed:

        async with BrightCloudService.from_credentials(key, secret) as bc:
            info = await bc.lookup_url("example.com")
    """

    def __init__(
        self,
        credential: Credential,
        *,
        base_url: str = DEFAULTS["base_url"],
        timeout: float = DEFAULTS["timeout"],
        signer: Optional[RequestSigner] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.credential = credential
        self.base_url = base_url.rstrip("/")
        self.signer = signer or RequestSigner()
        self._client = httpx.AsyncClient(timeout=timeout, transport=transport)

    @classmethod
    def from_credentials(cls, key: str, secret: str, **kwargs) -> BrightCloudService:
        return cls(Credential(key=key, secret=secret), **kwargs)

    @classmethod
    def from_config(
        cls,
        config: ClientConfig | Path | str | None = None,
        **kwargs,
    ) -> BrightCloudService:
        """Create a service from a ClientConfig or a YAML config path."""
        if not isinstance(config, ClientConfig):
            config = load_client_config(config)
        return cls(
            config.credential,
            base_url=config.base_url,
            timeout=config.timeout,
            **kwargs,
        )

    async def __aenter__(self) -> BrightCloudService:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def close(self) -> None:
        await self._client.aclose()

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    async def lookup_url(self, url: str) -> UrlLookupResult:
        """Get the categories and reputation of a URL.

        Categories only carry ID and confidence; see
        ``lookup_url_with_names`` for names and groups.

        Raises:
            InvalidURLError: If the URL cannot be validated
            TransportError: On network failure
            ServiceHTTPError: On a non-2xx response
            DecodeError: If the body is not a lookup document
        """
        target = validate_lookup_url(url)
        endpoint = f"{self.base_url}{URIS_PATH}/{quote(target, safe=':/')}"
        return await self._call(endpoint, decode_url_info)

    async def heartbeat(self) -> HeartBeatResult:
        """Get web service status and CDN update flags."""
        return await self._call(f"{self.base_url}{URIS_PATH}", decode_heartbeat)

    async def list_categories(self) -> list[CategoryInfo]:
        """List every BrightCloud category with its name and group."""
        return await self._call(f"{self.base_url}{CATEGORIES_PATH}", decode_categories)

    async def lookup_url_with_names(self, url: str) -> UrlLookupResult:
        """Look up a URL and fill category names and groups from the category list."""
        result = await self.lookup_url(url)
        if not result.categories:
            return result
        taxonomy = await self.list_categories()
        return join_categories(result, taxonomy)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    async def _call(self, endpoint: str, decode: Callable[[bytes], T]) -> T:
        request = self._client.build_request("GET", endpoint)
        signed = self.signer.sign(request, self.credential)

        logger.debug(f"GET {endpoint}")
        try:
            response = await self._client.send(signed)
        except httpx.HTTPError as e:
            raise TransportError(f"Request to {endpoint} failed: {e}") from e

        body = response.content
        if not response.is_success:
            reason = status_message(body) or response.reason_phrase
            logger.warning(f"GET {endpoint} returned {response.status_code}: {reason}")
            raise ServiceHTTPError(response.status_code, reason)

        return decode(body)

"""OAuth 1.0 request signing for the BrightCloud web service.

Every request carries a single-use ``Authorization`` header built from an
ordered set of OAuth parameters, a fresh timestamp and nonce, and an
HMAC-SHA1 signature over the request's base string. The web service
rejects any request whose header does not reproduce its own computation
byte for byte, so parameter order and escaping are fixed:

1. Parameters: oauth_version, oauth_consumer_key, oauth_signature_method,
   oauth_timestamp, oauth_nonce (in that order)
2. Normalized URL: scheme://host[:port]/path, ports 80 and 443 dropped,
   no query or fragment
3. Base string: METHOD & esc(url) & esc("k=v") joined with %26
4. Signature: esc(base64(HMAC-SHA1(esc(secret) + "&", base string)))
5. Header: OAuth realm="",k="v",...,oauth_signature="sig"

Escaping is query-string escaping: space becomes ``+``.
"""

import base64
import hashlib
import hmac
import logging
import os
import time
from typing import Callable, Optional, Sequence
from urllib.parse import quote_plus, unquote_plus

import httpx

from brightcloud.core.constants import (
    DEFAULT_PORTS,
    NONCE_BYTES,
    OAUTH_REALM,
    OAUTH_SIGNATURE_METHOD,
    OAUTH_VERSION,
)
from brightcloud.core.exceptions import RandomnessUnavailableError
from brightcloud.core.models import Credential


logger = logging.getLogger(__name__)

# Ordered (name, value) pairs; order is part of the signature
SignatureParameters = list[tuple[str, str]]

Clock = Callable[[], float]
RandomBytes = Callable[[int], bytes]
NonceFactory = Callable[[], str]


# ============================================================================
# Escaping and Normalization
# ============================================================================

def percent_escape(value: str) -> str:
    """Escape a value the way query parameters are escaped.

    Letters, digits and ``-_.~`` are kept, space becomes ``+`` and every
    other byte of the UTF-8 encoding becomes ``%XX``.
    """
    return quote_plus(value, safe="")


def percent_unescape(value: str) -> str:
    return unquote_plus(value)


def normalize_url(url: httpx.URL | str) -> str:
    """Reduce a URL to scheme://host[:port]/path for signing.

    The port is kept only when it is explicit and is neither 80 nor 443.
    Query strings and fragments are dropped.
    """
    if not isinstance(url, httpx.URL):
        url = httpx.URL(url)

    host = url.raw_host.decode("ascii")
    if ":" in host:
        host = f"[{host}]"

    port = ""
    if url.port is not None and url.port not in DEFAULT_PORTS:
        port = f":{url.port}"

    return f"{url.scheme}://{host}{port}{url.path}"


# ============================================================================
# Signature Primitives
# ============================================================================

def build_parameters(key: str, timestamp: int, nonce: str) -> SignatureParameters:
    return [
        ("oauth_version", OAUTH_VERSION),
        ("oauth_consumer_key", key),
        ("oauth_signature_method", OAUTH_SIGNATURE_METHOD),
        ("oauth_timestamp", str(timestamp)),
        ("oauth_nonce", nonce),
    ]


def build_base_string(
    method: str,
    url: httpx.URL | str,
    params: Sequence[tuple[str, str]],
) -> str:
    """Build the signature base string.

    Args:
        method: HTTP method, used as-is
        url: Request URL, normalized before escaping
        params: Ordered OAuth parameters

    Returns:
        ``METHOD&esc(url)&esc(k1=v1)%26esc(k2=v2)...``
    """
    encoded_params = "%26".join(
        percent_escape(f"{name}={value}") for name, value in params
    )
    return "&".join([method, percent_escape(normalize_url(url)), encoded_params])


def build_signature(base_string: str, secret: str) -> str:
    """HMAC-SHA1 over the base string, base64-encoded and escaped.

    There is no token secret in this flow, but the trailing ``&`` of the
    signing key is still required.
    """
    signing_key = f"{percent_escape(secret)}&"
    digest = hmac.new(
        signing_key.encode("utf-8"),
        base_string.encode("utf-8"),
        hashlib.sha1,
    ).digest()
    return percent_escape(base64.b64encode(digest).decode("ascii"))


def build_authorization_header(
    params: Sequence[tuple[str, str]],
    signature: str,
) -> str:
    """Assemble the Authorization header value.

    ``signature`` must already be escaped (see ``build_signature``).
    """
    pairs = ",".join(
        f'{percent_escape(name)}="{percent_escape(value)}"' for name, value in params
    )
    return f'OAuth realm="{OAUTH_REALM}",{pairs},oauth_signature="{signature}"'


def generate_nonce(random_bytes: RandomBytes = os.urandom) -> str:
    """Generate a single-use nonce.

    16 random bytes are hex-encoded through MD5. MD5 is only an encoder
    here; the unpredictability comes from the random source.

    Raises:
        RandomnessUnavailableError: If the random source fails
    """
    try:
        raw = random_bytes(NONCE_BYTES)
    except (OSError, NotImplementedError) as e:
        raise RandomnessUnavailableError(f"Unable to generate nonce: {e}") from e

    if len(raw) != NONCE_BYTES:
        raise RandomnessUnavailableError(
            f"Unable to generate nonce: expected {NONCE_BYTES} random bytes, got {len(raw)}"
        )

    return hashlib.md5(raw, usedforsecurity=False).hexdigest()


# ============================================================================
# Request Signer
# ============================================================================

class RequestSigner:
    """Signs outgoing httpx requests with a one-time OAuth header.

    The signer holds no credential and no per-request state, so a single
    instance may be shared between threads. Clock and randomness are
    injectable so tests can pin the timestamp and nonce.
    """

    def __init__(
        self,
        *,
        clock: Clock = time.time,
        random_bytes: RandomBytes = os.urandom,
        nonce_factory: Optional[NonceFactory] = None,
    ) -> None:
        """Initialize signer.

        Args:
            clock: Returns seconds since the epoch; truncated to whole seconds
            random_bytes: Secure random byte source used for nonces
            nonce_factory: Overrides nonce generation entirely (tests only)
        """
        self._clock = clock
        self._random_bytes = random_bytes
        self._nonce_factory = nonce_factory

    def timestamp(self) -> int:
        return int(self._clock())

    def nonce(self) -> str:
        if self._nonce_factory is not None:
            return self._nonce_factory()
        return generate_nonce(self._random_bytes)

    def authorization_header(
        self,
        method: str,
        url: httpx.URL | str,
        credential: Credential,
    ) -> str:
        """Compute a fresh Authorization header value for a request.

        Raises:
            RandomnessUnavailableError: If no nonce can be generated
        """
        nonce = self.nonce()
        params = build_parameters(credential.key, self.timestamp(), nonce)
        base_string = build_base_string(method, url, params)
        signature = build_signature(base_string, credential.secret)
        return build_authorization_header(params, signature)

    def sign(self, request: httpx.Request, credential: Credential) -> httpx.Request:
        """Return a copy of ``request`` carrying an Authorization header.

        Existing headers are kept; the Authorization header is appended.
        Method, URL and body are unchanged and ``request`` itself is not
        modified.

        Raises:
            RandomnessUnavailableError: If no nonce can be generated
        """
        header = self.authorization_header(request.method, request.url, credential)
        logger.debug(f"Signed {request.method} {normalize_url(request.url)}")

        headers = list(request.headers.multi_items())
        headers.append(("Authorization", header))

        return httpx.Request(
            request.method,
            request.url,
            headers=headers,
            content=request.content,
        )

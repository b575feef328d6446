"""OAuth request signing.

- RequestSigner: Attach a single-use OAuth 1.0 Authorization header
- normalize_url / build_base_string / build_signature: Signing primitives
"""

from brightcloud.auth.signer import (
    RequestSigner,
    build_authorization_header,
    build_base_string,
    build_parameters,
    build_signature,
    generate_nonce,
    normalize_url,
    percent_escape,
    percent_unescape,
)

__all__ = [
    "RequestSigner",
    "build_authorization_header",
    "build_base_string",
    "build_parameters",
    "build_signature",
    "generate_nonce",
    "normalize_url",
    "percent_escape",
    "percent_unescape",
]

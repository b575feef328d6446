"""BrightCloud URL categorization and reputation client.

- BrightCloudService: Look up URLs, check heartbeat, list categories
- RequestSigner: Single-use OAuth 1.0 request signing
"""

from brightcloud.auth.signer import RequestSigner
from brightcloud.core.config import ClientConfig, load_client_config
from brightcloud.core.constants import ReputationTier
from brightcloud.core.exceptions import (
    BrightCloudError,
    ConfigError,
    CredentialsMissingError,
    DecodeError,
    InvalidURLError,
    RandomnessUnavailableError,
    ServiceError,
    ServiceHTTPError,
    SigningError,
    TransportError,
)
from brightcloud.core.models import (
    CategoryInfo,
    Credential,
    HeartBeatResult,
    UrlLookupResult,
)
from brightcloud.service import BrightCloudService

__version__ = "0.1.0"

__all__ = [
    "BrightCloudService",
    "RequestSigner",
    "ClientConfig",
    "load_client_config",
    "ReputationTier",
    "Credential",
    "CategoryInfo",
    "UrlLookupResult",
    "HeartBeatResult",
    "BrightCloudError",
    "ConfigError",
    "CredentialsMissingError",
    "SigningError",
    "RandomnessUnavailableError",
    "InvalidURLError",
    "ServiceError",
    "TransportError",
    "ServiceHTTPError",
    "DecodeError",
]

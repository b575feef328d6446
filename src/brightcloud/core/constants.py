"""Constants used throughout the BrightCloud client.

This module contains enums, endpoint paths, and default values
to ensure consistency across the application.
"""

from enum import Enum


class ReputationTier(Enum):
    """BrightCloud reputation index buckets (0-100 scale)."""
    TRUSTWORTHY = "trustworthy"
    LOW_RISK = "low_risk"
    MODERATE_RISK = "moderate_risk"
    SUSPICIOUS = "suspicious"
    HIGH_RISK = "high_risk"

    @classmethod
    def from_index(cls, index: int) -> "ReputationTier":
        """Map a reputation index to its tier.

        Raises:
            ValueError: If index is outside 0-100
        """
        if index < 0 or index > 100:
            raise ValueError(f"Reputation index out of range: {index}")
        for lower, tier in REPUTATION_THRESHOLDS:
            if index >= lower:
                return tier
        return cls.HIGH_RISK


# Lower bound of each tier, highest first
REPUTATION_THRESHOLDS = (
    (80, ReputationTier.TRUSTWORTHY),
    (60, ReputationTier.LOW_RISK),
    (40, ReputationTier.MODERATE_RISK),
    (20, ReputationTier.SUSPICIOUS),
    (0, ReputationTier.HIGH_RISK),
)


# OAuth 1.0 signing
OAUTH_VERSION = "1.0"
OAUTH_SIGNATURE_METHOD = "HMAC-SHA1"
OAUTH_REALM = ""
NONCE_BYTES = 16


# Web service endpoints, relative to the base URL
URIS_PATH = "/rest/uris"
CATEGORIES_PATH = "/rest/uris/categories"


# Ports that are never included in a normalized URL
DEFAULT_PORTS = {80, 443}


# Environment variables that override the config file
ENV_KEY = "BRIGHTCLOUD_KEY"
ENV_SECRET = "BRIGHTCLOUD_SECRET"
ENV_BASE_URL = "BRIGHTCLOUD_BASE_URL"


# Application-wide defaults
DEFAULTS = {
    "base_url": "http://thor.brightcloud.com",
    "timeout": 30.0,
}

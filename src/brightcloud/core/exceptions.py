class BrightCloudError(Exception):
    pass

class ConfigError(BrightCloudError):
    pass

class CredentialsMissingError(ConfigError):
    pass

class SigningError(BrightCloudError):
    pass

class RandomnessUnavailableError(SigningError):
    """Secure random source failed. The request must not be sent unsigned."""
    pass

class InvalidURLError(BrightCloudError):
    pass

class ServiceError(BrightCloudError):
    pass

class TransportError(ServiceError):
    """Network-level failure talking to the web service."""
    pass

class ServiceHTTPError(ServiceError):
    """Web service answered with a non-2xx status."""

    def __init__(self, status_code: int, reason: str = "") -> None:
        self.status_code = status_code
        self.reason = reason
        status = f"{status_code} {reason}".strip()
        super().__init__(f"{status}: code {status_code}")

class DecodeError(ServiceError):
    """Response body is not well-formed or has an unexpected shape."""
    pass

"""Exception types shared across coach."""


class CoachError(Exception):
    """Base class for coach errors."""


class ValidationError(CoachError, ValueError):
    """Invalid athlete, goal or measurement input."""


class ClientError(CoachError):
    """A third-party API call failed.

    `retryable` tells the caller whether trying again later can succeed
    (rate limits, server errors, network failures) or whether the user has
    to act first (missing or revoked credentials, bad requests).
    """

    retryable = False

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        retryable: bool | None = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        if retryable is not None:
            self.retryable = retryable


class NotConnectedError(ClientError):
    """No credentials stored for the provider."""


class CredentialExpiredError(ClientError):
    """The provider rejected our credentials; the user must reconnect."""


class RateLimitedError(ClientError):
    """The provider is throttling requests."""

    retryable = True

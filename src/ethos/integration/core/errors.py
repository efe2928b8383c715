from __future__ import annotations


class EthosError(Exception):
    """Base class for all integration errors."""

    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


class ConfigurationError(EthosError):
    """Unknown URL base category."""


class InvalidArgument(EthosError, ValueError):
    """A required argument (resource name, API key) is missing."""


class AuthenticationError(EthosError):
    """The token exchange did not produce a token."""


class IntegrationError(EthosError):
    """A GraphQL call returned a non-success status."""


class RequestFailed(EthosError):
    """A get/post call returned a non-success status.

    Only ever carried inside an error-result, never raised to callers.
    """

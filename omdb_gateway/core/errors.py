"""
Error taxonomy for the gateway.

Every error carries the HTTP status it is reported with. Errors are
surfaced to the caller as plain-text bodies and are never retried.
"""


class GatewayError(Exception):
    """Base class for errors reported back to the HTTP caller."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class MissingParameter(GatewayError):
    """A required query parameter was absent or empty."""

    status_code = 400


class NotFound(GatewayError):
    """The provider reported no match. Message is the provider's text."""

    status_code = 404


class UpstreamUnavailable(GatewayError):
    """The upstream call could not complete or returned an unreadable body."""

    # Reported the same way as NotFound at the HTTP layer.
    status_code = 404


class NoMatches(GatewayError):
    """A filter over the candidate pool produced no results."""

    status_code = 404

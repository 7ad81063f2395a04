"""Exception types raised by the campus paths client."""

from typing import Optional


class CampusPathsError(Exception):
    """Base class for all campus paths errors."""


class UnknownDirectionError(CampusPathsError, ValueError):
    """Raised when a compass code is not one of the eight known codes."""

    def __init__(self, code: object) -> None:
        super().__init__(f"Unknown compass direction: {code!r}")
        self.code = code


class UnknownBuildingError(CampusPathsError, KeyError):
    """Raised when a building short name is not in the directory."""

    def __init__(self, short_name: str) -> None:
        super().__init__(short_name)
        self.short_name = short_name

    def __str__(self) -> str:
        return f"Unknown building: {self.short_name}"


class UpstreamUnavailableError(CampusPathsError):
    """
    Raised by the routing service client when a request cannot be served.

    Covers non-success status codes, transport failures, and payloads that
    cannot be reshaped into buildings or path segments.

    Attributes:
        status_code: HTTP status of the failed response, or None when the
            server was never reached or the payload was malformed
    """

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code

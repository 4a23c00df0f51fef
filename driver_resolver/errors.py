"""
Exception hierarchy for driver resolution.

Every failure carries its ErrorKind, the command text (when a command was
built) and the underlying detail, so a caller can diagnose the problem
without re-running the helper.
"""
from typing import Optional

from .models import ErrorKind


class DriverResolverError(Exception):
    kind = ErrorKind.RESOLUTION_FAILURE

    def __init__(self, message: str, command: str = "", detail: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.command = command
        self.detail = detail

    def __str__(self) -> str:
        if self.detail and self.detail not in self.message:
            return f"{self.message}; {self.detail}"
        return self.message


class InvalidArgumentError(DriverResolverError, TypeError):
    kind = ErrorKind.INVALID_ARGUMENT


class LocatorError(DriverResolverError):
    kind = ErrorKind.LOCATOR_FAILURE


class LaunchError(DriverResolverError):
    kind = ErrorKind.LAUNCH_FAILURE


class MalformedOutputError(DriverResolverError):
    kind = ErrorKind.MALFORMED_OUTPUT


class ResolutionError(DriverResolverError):
    kind = ErrorKind.RESOLUTION_FAILURE


class ValidationError(DriverResolverError):
    kind = ErrorKind.VALIDATION_FAILURE


class ProcessTimeoutError(DriverResolverError):
    kind = ErrorKind.TIMEOUT


_ERRORS_BY_KIND = {
    cls.kind: cls
    for cls in (
        InvalidArgumentError,
        LocatorError,
        LaunchError,
        MalformedOutputError,
        ResolutionError,
        ValidationError,
        ProcessTimeoutError,
    )
}


def error_for_kind(kind: ErrorKind, message: str, command: str = "") -> DriverResolverError:
    return _ERRORS_BY_KIND.get(kind, DriverResolverError)(message, command=command)

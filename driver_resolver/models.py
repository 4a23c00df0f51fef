"""
Data models for driver resolution.

This module defines the data structures for:
- Browser options supplied by the caller
- Raw process results from the helper program
- Parsed helper output (result message and log entries)
- Tagged resolution results returned by the facade
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, List, Dict, Any


WARN_LEVEL = "WARN"


class ErrorKind(Enum):
    """Category of a failed resolution"""
    INVALID_ARGUMENT = "invalid_argument"
    LOCATOR_FAILURE = "locator_failure"
    LAUNCH_FAILURE = "launch_failure"
    MALFORMED_OUTPUT = "malformed_output"
    RESOLUTION_FAILURE = "resolution_failure"
    VALIDATION_FAILURE = "validation_failure"
    TIMEOUT = "timeout"


class OSFamily(Enum):
    """Operating system families with a bundled helper binary"""
    WINDOWS = "windows"
    MACOS = "macos"
    LINUX = "linux"


@dataclass(frozen=True)
class BrowserOptions:
    """Browser selection passed to the helper program."""
    browser_name: str
    browser_version: Optional[str] = None
    binary_path: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "browser_name": self.browser_name,
            "browser_version": self.browser_version,
            "binary_path": self.binary_path,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BrowserOptions":
        return cls(
            browser_name=data["browser_name"],
            browser_version=data.get("browser_version"),
            binary_path=data.get("binary_path"),
        )


@dataclass
class ProcessResult:
    """Captured output of one helper execution."""
    stdout: str
    stderr: str
    exit_code: int
    args: List[str] = field(default_factory=list)

    @property
    def command(self) -> str:
        return format_command(self.args)

    @property
    def succeeded(self) -> bool:
        return self.exit_code == 0


@dataclass
class LogEntry:
    """A log line emitted by the helper program."""
    level: str
    message: str


@dataclass
class ManagerOutput:
    """Parsed JSON output of the helper program."""
    result_message: str
    logs: List[LogEntry] = field(default_factory=list)

    def warnings(self) -> List[LogEntry]:
        return [log for log in self.logs if log.level == WARN_LEVEL]


@dataclass
class Resolution:
    """
    Outcome of a single resolution call.

    Either ``path`` is set (success) or ``kind`` and ``detail`` describe
    the failure. ``warnings`` holds the WARN messages surfaced during the
    call, in the order the helper emitted them.
    """
    path: Optional[str] = None
    kind: Optional[ErrorKind] = None
    detail: str = ""
    command: str = ""
    warnings: List[str] = field(default_factory=list)
    error: Optional[Exception] = field(default=None, repr=False, compare=False)

    @property
    def ok(self) -> bool:
        return self.kind is None

    @classmethod
    def success(cls, path: str, command: str = "", warnings: Optional[List[str]] = None) -> "Resolution":
        return cls(path=path, command=command, warnings=list(warnings or []))

    @classmethod
    def failure(cls, error: Exception, warnings: Optional[List[str]] = None) -> "Resolution":
        return cls(
            kind=getattr(error, "kind", ErrorKind.RESOLUTION_FAILURE),
            detail=str(error),
            command=getattr(error, "command", "") or "",
            warnings=list(warnings or []),
            error=error,
        )

    def unwrap(self) -> str:
        """Return the driver path or raise the error that caused the failure."""
        if self.ok:
            return self.path
        if self.error is not None:
            raise self.error.with_traceback(None)
        from .errors import error_for_kind
        raise error_for_kind(self.kind, self.detail, command=self.command)

    def to_dict(self) -> dict:
        return {
            "ok": self.ok,
            "path": self.path,
            "kind": self.kind.value if self.kind else None,
            "detail": self.detail,
            "command": self.command,
            "warnings": list(self.warnings),
        }


def format_command(args: List[str]) -> str:
    """Join an argument vector into display text for diagnostics."""
    return " ".join(args)

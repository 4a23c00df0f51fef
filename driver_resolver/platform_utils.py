"""Operating system detection and executable checks."""
import os
import sys
from pathlib import Path
from typing import Optional

from .errors import ValidationError
from .models import OSFamily


def detect_os_family(platform: Optional[str] = None) -> Optional[OSFamily]:
    """Map ``sys.platform`` (or the given value) to an OSFamily, or None."""
    platform = platform or sys.platform
    if platform.startswith(("win", "cygwin", "msys")):
        return OSFamily.WINDOWS
    if platform == "darwin":
        return OSFamily.MACOS
    if platform.startswith("linux"):
        return OSFamily.LINUX
    return None


def is_executable(path) -> bool:
    if not path:
        return False
    candidate = Path(path)
    return candidate.is_file() and os.access(candidate, os.X_OK)


def assert_executable(path) -> str:
    """Raise ValidationError unless ``path`` is an existing executable file."""
    if not path:
        raise ValidationError("Driver path is empty", detail="helper returned no location")
    candidate = Path(path)
    if not candidate.exists():
        raise ValidationError(f"does not exist: {path!r}")
    if not candidate.is_file():
        raise ValidationError(f"not a file: {path!r}", detail="path is a directory")
    if not os.access(candidate, os.X_OK):
        raise ValidationError(f"not executable: {path!r}")
    return str(path)

"""
driver-resolver - locate browser driver executables via selenium-manager.

Provides:
- Platform-specific lookup of the bundled selenium-manager helper
- Command construction from browser options
- Synchronous helper execution with an optional timeout
- Parsing and validation of the helper's JSON answer
"""
__version__ = "0.1.0"

from .config import ResolverConfig
from .errors import (
    DriverResolverError,
    InvalidArgumentError,
    LaunchError,
    LocatorError,
    MalformedOutputError,
    ProcessTimeoutError,
    ResolutionError,
    ValidationError,
)
from .models import BrowserOptions, ErrorKind, Resolution
from .resolver import DriverResolver, driver_path, resolve

__all__ = [
    "__version__",
    "BrowserOptions",
    "DriverResolver",
    "DriverResolverError",
    "ErrorKind",
    "InvalidArgumentError",
    "LaunchError",
    "LocatorError",
    "MalformedOutputError",
    "ProcessTimeoutError",
    "Resolution",
    "ResolutionError",
    "ResolverConfig",
    "ValidationError",
    "driver_path",
    "resolve",
]

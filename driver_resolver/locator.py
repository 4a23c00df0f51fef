"""
Locates the bundled selenium-manager helper for the running platform.

The binaries ship inside the package:

    driver_resolver/bin/windows/selenium-manager.exe
    driver_resolver/bin/macos/selenium-manager
    driver_resolver/bin/linux/selenium-manager
"""
import threading
from pathlib import Path
from typing import Optional

from .errors import LocatorError
from .logging_config import get_logger
from .models import OSFamily
from .platform_utils import detect_os_family, is_executable

logger = get_logger("driver_resolver.locator")

BIN_DIR = Path(__file__).resolve().parent / "bin"

BINARY_NAMES = {
    OSFamily.WINDOWS: "selenium-manager.exe",
    OSFamily.MACOS: "selenium-manager",
    OSFamily.LINUX: "selenium-manager",
}


class PlatformBinaryLocator:
    """Finds the helper binary once and remembers it for the process lifetime."""

    def __init__(
        self,
        bin_dir: Optional[Path] = None,
        platform: Optional[str] = None,
        manager_path: Optional[str] = None,
    ):
        self.bin_dir = Path(bin_dir) if bin_dir is not None else BIN_DIR
        self.platform = platform
        self.manager_path = manager_path
        self._binary: Optional[str] = None
        self._lock = threading.Lock()

    def candidate_path(self) -> Path:
        """Path the helper is expected at, without checking the filesystem."""
        if self.manager_path:
            return Path(self.manager_path).expanduser().resolve()

        family = detect_os_family(self.platform)
        if family is None:
            raise LocatorError(
                "Unable to obtain Selenium Manager",
                detail=f"unsupported platform: {self.platform or 'current'}",
            )
        return (self.bin_dir / family.value / BINARY_NAMES[family]).resolve()

    def locate(self) -> str:
        if self._binary is not None:
            return self._binary

        with self._lock:
            if self._binary is None:
                location = self.candidate_path()
                if not is_executable(location):
                    raise LocatorError(
                        "Unable to obtain Selenium Manager",
                        detail=f"missing or not executable: {location}",
                    )
                logger.debug(f"Selenium Manager found at {location}")
                self._binary = str(location)
        return self._binary

    def reset(self):
        with self._lock:
            self._binary = None


_default_locator: Optional[PlatformBinaryLocator] = None
_default_lock = threading.Lock()


def get_default_locator() -> PlatformBinaryLocator:
    """Process-wide locator shared by the default resolver."""
    global _default_locator
    if _default_locator is None:
        with _default_lock:
            if _default_locator is None:
                _default_locator = PlatformBinaryLocator()
    return _default_locator

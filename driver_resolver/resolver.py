"""
DriverResolver - resolves a browser driver path through selenium-manager.

Runs the bundled helper once per call:

    options -> argument vector -> helper process -> JSON output -> driver path

Only WARN entries from the helper's log are surfaced; everything else it
reports is dropped.
"""
import threading
from typing import Any, List, Optional

from .command import CommandBuilder
from .config import ResolverConfig
from .errors import (
    DriverResolverError,
    InvalidArgumentError,
    MalformedOutputError,
    ResolutionError,
    ValidationError,
)
from .locator import PlatformBinaryLocator, get_default_locator
from .logging_config import get_logger
from .models import BrowserOptions, ManagerOutput, ProcessResult, Resolution
from .parser import ResultParser
from .platform_utils import assert_executable
from .runner import ProcessRunner

logger = get_logger("driver_resolver.resolver")


def coerce_options(options: Any) -> BrowserOptions:
    """
    Accept a BrowserOptions or any object shaped like one.

    The object must expose a non-empty string ``browser_name``; the optional
    ``browser_version`` and ``binary_path`` (or ``binary``) must be strings
    or None.
    """
    if isinstance(options, BrowserOptions):
        browser_name = options.browser_name
        browser_version = options.browser_version
        binary_path = options.binary_path
    else:
        browser_name = getattr(options, "browser_name", None)
        browser_version = getattr(options, "browser_version", None)
        binary_path = getattr(options, "binary_path", None)
        if binary_path is None:
            binary_path = getattr(options, "binary", None)

    if not isinstance(browser_name, str) or not browser_name:
        raise InvalidArgumentError(
            f"DriverResolver requires a BrowserOptions instance, not {options!r}"
        )
    for name, value in (("browser_version", browser_version), ("binary_path", binary_path)):
        if value is not None and not isinstance(value, str):
            raise InvalidArgumentError(
                f"DriverResolver requires {name} to be a string or None, not {value!r}"
            )
    for name, value in (
        ("browser_name", browser_name),
        ("browser_version", browser_version),
        ("binary_path", binary_path),
    ):
        if value is not None and "\x00" in value:
            raise InvalidArgumentError(f"DriverResolver: {name} contains a NUL byte: {value!r}")

    if isinstance(options, BrowserOptions):
        return options
    return BrowserOptions(
        browser_name=browser_name,
        browser_version=browser_version,
        binary_path=binary_path,
    )


class DriverResolver:
    """Facade tying together locator, command builder, runner and parser."""

    def __init__(
        self,
        config: Optional[ResolverConfig] = None,
        locator: Optional[PlatformBinaryLocator] = None,
        runner: Optional[ProcessRunner] = None,
        parser: Optional[ResultParser] = None,
    ):
        self.config = config or ResolverConfig()
        if locator is None:
            if self.config.manager_path:
                locator = PlatformBinaryLocator(manager_path=self.config.manager_path)
            else:
                locator = get_default_locator()
        self.locator = locator
        self.runner = runner or ProcessRunner(timeout=self.config.timeout)
        self.parser = parser or ResultParser()

    def driver_path(self, options: Any) -> str:
        """Return the path to the driver for ``options`` or raise DriverResolverError."""
        browser_options = coerce_options(options)
        return self._resolve(browser_options).unwrap()

    def resolve(self, options: Any) -> Resolution:
        """Like driver_path, but report failures as a Resolution instead of raising."""
        try:
            browser_options = coerce_options(options)
        except InvalidArgumentError as e:
            return Resolution.failure(e)
        return self._resolve(browser_options)

    def _resolve(self, options: BrowserOptions) -> Resolution:
        warnings: List[str] = []
        try:
            binary = self.locator.locate()
            args = CommandBuilder(binary).build(options)
            result = self.runner.run(args)
            output = self._interpret(result)

            for entry in output.warnings():
                logger.warning_with(entry.message, source="selenium-manager")
                warnings.append(entry.message)

            location = output.result_message
            try:
                assert_executable(location)
            except ValidationError as e:
                e.command = result.command
                raise
            logger.debug(f"Driver found at {location}")
            return Resolution.success(location, command=result.command, warnings=warnings)

        except DriverResolverError as e:
            logger.debug_with("Driver resolution failed", kind=e.kind.value, command=e.command)
            return Resolution.failure(e, warnings)

    def _interpret(self, result: ProcessResult) -> ManagerOutput:
        command = result.command
        if result.exit_code != 0:
            message = ""
            try:
                message = self.parser.parse(result.stdout, command=command).result_message
            except MalformedOutputError as e:
                logger.debug(f"Could not parse output of failed command: {e.detail}")
            raise ResolutionError(
                f"Unsuccessful command executed: {command}\n{message}{result.stderr}",
                command=command,
            )
        return self.parser.parse(result.stdout, command=command)


_default_resolver: Optional[DriverResolver] = None
_default_lock = threading.Lock()


def get_default_resolver() -> DriverResolver:
    global _default_resolver
    if _default_resolver is None:
        with _default_lock:
            if _default_resolver is None:
                _default_resolver = DriverResolver(config=ResolverConfig.from_env())
    return _default_resolver


def driver_path(options: Any) -> str:
    return get_default_resolver().driver_path(options)


def resolve(options: Any) -> Resolution:
    return get_default_resolver().resolve(options)

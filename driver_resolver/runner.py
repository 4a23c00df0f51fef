import subprocess
from typing import List, Optional

from .errors import LaunchError, ProcessTimeoutError
from .logging_config import get_logger
from .models import ProcessResult, format_command

logger = get_logger("driver_resolver.runner")


class ProcessRunner:
    """Runs the helper synchronously and captures its output."""

    def __init__(self, timeout: Optional[float] = None):
        self.timeout = timeout

    def run(self, args: List[str]) -> ProcessResult:
        command = format_command(args)
        logger.debug(f"Executing Process {command}")

        try:
            completed = subprocess.run(
                args,
                stdin=subprocess.DEVNULL,
                capture_output=True,
                encoding="utf-8",
                errors="replace",
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired as e:
            # subprocess.run kills the child before re-raising
            raise ProcessTimeoutError(
                f"Unsuccessful command executed: {command}",
                command=command,
                detail=f"timed out after {e.timeout} seconds",
            ) from e
        except OSError as e:
            raise LaunchError(
                f"Unsuccessful command executed: {command}",
                command=command,
                detail=e.strerror or str(e),
            ) from e
        except ValueError as e:
            # embedded NUL in an argument
            raise LaunchError(
                f"Unsuccessful command executed: {command}",
                command=command,
                detail=str(e),
            ) from e

        logger.debug_with(
            "Process finished",
            command=command,
            exit_code=completed.returncode,
        )
        return ProcessResult(
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
            exit_code=completed.returncode,
            args=list(args),
        )

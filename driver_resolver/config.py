import os
from dataclasses import dataclass
from typing import Optional


TIMEOUT_ENV = "DRIVER_RESOLVER_TIMEOUT"
MANAGER_PATH_ENV = "DRIVER_RESOLVER_MANAGER_PATH"


@dataclass
class ResolverConfig:
    """
    Runtime settings for the resolver.

    timeout: seconds to wait for the helper before killing it; None waits forever
    manager_path: explicit helper binary, bypassing the bundled per-OS binaries
    """
    timeout: Optional[float] = None
    manager_path: Optional[str] = None

    def __post_init__(self):
        if self.timeout is not None and self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout}")

    @classmethod
    def from_env(cls) -> "ResolverConfig":
        raw_timeout = os.environ.get(TIMEOUT_ENV, "").strip()
        timeout = None
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError:
                raise ValueError(f"{TIMEOUT_ENV} must be a number of seconds, got {raw_timeout!r}")
        manager_path = os.environ.get(MANAGER_PATH_ENV) or None
        return cls(timeout=timeout, manager_path=manager_path)

    def to_dict(self) -> dict:
        return {
            "timeout": self.timeout,
            "manager_path": self.manager_path,
        }

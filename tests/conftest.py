import os
import stat
import sys
from pathlib import Path
from typing import Union

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))


def _make_executable(path: Path):
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)


@pytest.fixture
def driver_file(tmp_path):
    """An executable file standing in for a resolved driver."""
    driver = tmp_path / "drivers" / "chromedriver"
    driver.parent.mkdir()
    driver.write_text("#!/bin/sh\nexit 0\n")
    _make_executable(driver)
    return driver


@pytest.fixture
def make_helper(tmp_path):
    """
    Build a fake selenium-manager script.

    The script records its argv to ``<helper>.args`` and replays the given
    stdout (text or raw bytes), stderr and exit code.
    """
    if os.name == "nt":
        pytest.skip("fake helper scripts rely on a POSIX shebang")

    def factory(stdout: Union[str, bytes] = "", stderr: str = "", exit_code: int = 0, name: str = "selenium-manager") -> Path:
        helper = tmp_path / "helper" / name
        helper.parent.mkdir(exist_ok=True)
        args_file = helper.with_suffix(".args")
        helper.write_text(
            f"#!{sys.executable}\n"
            "import json, sys\n"
            f"with open({str(args_file)!r}, 'w') as f:\n"
            "    json.dump(sys.argv[1:], f)\n"
            f"sys.stdout{'.buffer' if isinstance(stdout, bytes) else ''}.write({stdout!r})\n"
            f"sys.stderr.write({stderr!r})\n"
            f"sys.exit({exit_code})\n"
        )
        _make_executable(helper)
        return helper

    return factory

import json
import logging
import sys
from pathlib import Path

import pytest
from click.testing import CliRunner

sys.path.insert(0, str(Path(__file__).parent.parent))

from driver_resolver import __version__
from driver_resolver.cli import main
from driver_resolver.config import MANAGER_PATH_ENV, TIMEOUT_ENV


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    package_logger = logging.getLogger("driver_resolver")
    for handler in package_logger.handlers:
        handler.close()
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)


@pytest.fixture
def runner(monkeypatch):
    monkeypatch.delenv(MANAGER_PATH_ENV, raising=False)
    monkeypatch.delenv(TIMEOUT_ENV, raising=False)
    return CliRunner()


def _output(message: str, logs=None) -> str:
    return json.dumps({"result": {"message": message}, "logs": logs or []})


class TestCli:
    def test_version(self, runner):
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_resolve_prints_path(self, runner, monkeypatch, make_helper, driver_file):
        helper = make_helper(stdout=_output(str(driver_file)))
        monkeypatch.setenv(MANAGER_PATH_ENV, str(helper))
        result = runner.invoke(main, ["resolve", "--browser", "chrome", "--browser-version", "120"])
        assert result.exit_code == 0, result.output
        assert result.stdout.strip().splitlines()[-1] == str(driver_file)
        recorded = json.loads(helper.with_suffix(".args").read_text())
        assert recorded == ["--browser", "chrome", "--output", "json", "--browser-version", "120"]

    def test_resolve_json(self, runner, monkeypatch, make_helper, driver_file):
        logs = [{"level": "WARN", "message": "careful"}]
        helper = make_helper(stdout=_output(str(driver_file), logs))
        monkeypatch.setenv(MANAGER_PATH_ENV, str(helper))
        result = runner.invoke(main, ["resolve", "--browser", "firefox", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout.strip().splitlines()[-1])
        assert data["ok"] is True
        assert data["path"] == str(driver_file)
        assert data["warnings"] == ["careful"]

    def test_resolve_failure_exits_nonzero(self, runner, monkeypatch, make_helper):
        helper = make_helper(stdout=_output("boom"), stderr="oops", exit_code=1)
        monkeypatch.setenv(MANAGER_PATH_ENV, str(helper))
        result = runner.invoke(main, ["resolve", "--browser", "chrome", "--json"])
        assert result.exit_code == 1
        data = json.loads(result.stdout.strip().splitlines()[-1])
        assert data["kind"] == "resolution_failure"
        assert "boom" in data["detail"]

    def test_resolve_requires_browser(self, runner):
        result = runner.invoke(main, ["resolve"])
        assert result.exit_code == 2

    def test_locate(self, runner, monkeypatch, make_helper):
        helper = make_helper()
        monkeypatch.setenv(MANAGER_PATH_ENV, str(helper))
        result = runner.invoke(main, ["locate"])
        assert result.exit_code == 0
        assert result.stdout.strip() == str(helper.resolve())

    def test_locate_missing_helper(self, runner, monkeypatch, tmp_path):
        monkeypatch.setenv(MANAGER_PATH_ENV, str(tmp_path / "missing"))
        result = runner.invoke(main, ["locate"])
        assert result.exit_code == 1

    def test_config(self, runner, monkeypatch):
        monkeypatch.setenv(TIMEOUT_ENV, "15")
        result = runner.invoke(main, ["config"])
        assert result.exit_code == 0
        assert "Timeout" in result.stdout
        assert "15s" in result.stdout

    def test_invalid_timeout_env(self, runner, monkeypatch):
        monkeypatch.setenv(TIMEOUT_ENV, "soon")
        result = runner.invoke(main, ["config"])
        assert result.exit_code == 2

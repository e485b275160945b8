"""
Tests for logging setup.
"""

import logging
import sys

from click.testing import CliRunner

from boardrelease.core.observability.logging_config import (
    ENV_LOG_FILE,
    ENV_LOG_FILE_LEVEL,
    ENV_LOG_LEVEL,
    LogSettings,
    resolve_level,
    settings_from_cli,
    setup_logging,
)
from boardrelease.main import cli


def _owned_handlers() -> list[logging.Handler]:
    return [h for h in logging.getLogger().handlers if getattr(h, "_boardrelease_owned", False)]


class TestResolveLevel:
    def test_flag_precedence(self):
        assert resolve_level(True, True, True, "ERROR") == "DEBUG"
        assert resolve_level(False, True, True, "ERROR") == "INFO"
        assert resolve_level(False, False, True, "DEBUG") == "ERROR"

    def test_env_then_default(self):
        assert resolve_level(False, False, False, "INFO") == "INFO"
        assert resolve_level(False, False, False, None) == "WARNING"


class TestSettingsFromCli:
    def test_reads_environment(self):
        env = {ENV_LOG_LEVEL: "INFO", ENV_LOG_FILE: "/tmp/x.log", ENV_LOG_FILE_LEVEL: "DEBUG"}
        assert settings_from_cli(False, False, False, env) == LogSettings(
            level="INFO", log_file="/tmp/x.log", log_file_level="DEBUG"
        )

    def test_empty_values_ignored(self):
        settings = settings_from_cli(False, False, False, {ENV_LOG_FILE: ""})
        assert settings.log_file is None
        assert settings.level == "WARNING"


class TestSetupLogging:
    def teardown_method(self):
        setup_logging(LogSettings())

    def test_console_level(self):
        setup_logging(LogSettings(level="INFO"))
        assert logging.getLogger().level == logging.INFO
        assert len(_owned_handlers()) == 1

    def test_unknown_level_falls_back(self):
        setup_logging(LogSettings(level="LOUD"))
        assert logging.getLogger().level == logging.WARNING

    def test_file_handler(self, tmp_path):
        log_file = tmp_path / "release.log"
        setup_logging(LogSettings(log_file=str(log_file), log_file_level="DEBUG"))
        assert logging.getLogger().level == logging.DEBUG
        logging.getLogger("boardrelease.test").debug("hello file")
        for handler in _owned_handlers():
            handler.flush()
        assert "hello file" in log_file.read_text()

    def test_repeated_setup_closes_previous_file_handler(self, tmp_path):
        setup_logging(LogSettings(log_file=str(tmp_path / "a.log")))
        first = [h for h in _owned_handlers() if isinstance(h, logging.FileHandler)]
        assert len(first) == 1

        setup_logging(LogSettings(log_file=str(tmp_path / "b.log")))
        second = [h for h in _owned_handlers() if isinstance(h, logging.FileHandler)]

        assert len(second) == 1
        assert second[0] is not first[0]
        assert first[0] not in logging.getLogger().handlers
        assert first[0].stream is None  # closed

    def test_foreign_handlers_left_alone(self):
        foreign = logging.NullHandler()
        root = logging.getLogger()
        root.addHandler(foreign)
        try:
            setup_logging(LogSettings())
            assert foreign in root.handlers
        finally:
            root.removeHandler(foreign)

    def test_console_follows_current_stderr(self):
        setup_logging(LogSettings())
        console = _owned_handlers()[0]
        assert console.stream is sys.stderr

    def test_quiets_yaml_unless_debug(self):
        setup_logging(LogSettings(level="INFO"))
        assert logging.getLogger("yaml").level == logging.WARNING
        setup_logging(LogSettings(level="DEBUG"))
        assert logging.getLogger("yaml").level == logging.DEBUG


class TestCliLogging:
    def teardown_method(self):
        setup_logging(LogSettings())

    def test_repeated_invocations_keep_one_file_handler(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv(ENV_LOG_FILE, str(tmp_path / "cli.log"))
        runner = CliRunner()
        for _ in range(3):
            runner.invoke(cli, ["version"])

        file_handlers = [h for h in _owned_handlers() if isinstance(h, logging.FileHandler)]
        assert len(file_handlers) == 1

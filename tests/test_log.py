"""Tests for logging setup."""

import logging

from ddsdecoder.log import setup_logging


class TestSetupLogging:
    def test_embedded_mode_only_touches_package_logger(self, tmp_path, monkeypatch):
        root = logging.getLogger()
        sentinel = logging.NullHandler()
        monkeypatch.setattr(root, "handlers", [sentinel])
        package_logger = logging.getLogger("ddsdecoder")
        monkeypatch.setattr(package_logger, "handlers", [])
        monkeypatch.setattr(package_logger, "level", package_logger.level)

        log_file = tmp_path / "logs" / "ddsdecoder.log"
        setup_logging("DEBUG", str(log_file))

        assert root.handlers == [sentinel]
        assert package_logger.level == logging.DEBUG
        assert len(package_logger.handlers) == 1
        package_logger.handlers[0].close()

    def test_invalid_level_falls_back_to_warning(self, monkeypatch, capsys):
        root = logging.getLogger()
        monkeypatch.setattr(root, "handlers", [logging.NullHandler()])
        package_logger = logging.getLogger("ddsdecoder")
        monkeypatch.setattr(package_logger, "level", package_logger.level)

        setup_logging("LOUD")

        assert package_logger.level == logging.WARNING
        assert "Invalid log level" in capsys.readouterr().out

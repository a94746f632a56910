"""Tests for environment settings and logging configuration."""

# Standard Library
import logging

# Third Party
import pydantic
import pytest

# Local
import conftest


conftest.add_chemscan_to_sys_path()

# local repo modules
from chemscan import logging_config
from chemscan import settings


#============================================
@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
	for name in ("LOG_LEVEL", "LOG_FORMAT", "CUSTOM_ABBREVIATIONS_PATH", "CUSTOM_SUPERATOMS_PATH"):
		monkeypatch.delenv(f"CHEMSCAN_{name}", raising=False)
	settings.get_settings.cache_clear()
	yield
	settings.get_settings.cache_clear()


# ============================================
# settings
# ============================================

#============================================
def test_default_settings():
	loaded = settings.ChemScanSettings(_env_file=None)
	assert loaded.log_level == "WARNING"
	assert loaded.log_format == "console"
	assert loaded.custom_abbreviations_path is None


#============================================
def test_settings_from_environment(monkeypatch, tmp_path):
	monkeypatch.setenv("CHEMSCAN_LOG_FORMAT", "json")
	monkeypatch.setenv("CHEMSCAN_CUSTOM_SUPERATOMS_PATH", str(tmp_path / "extra.yaml"))
	loaded = settings.get_settings()
	assert loaded.log_format == "json"
	assert loaded.custom_superatoms_path == tmp_path / "extra.yaml"
	assert settings.get_settings() is loaded


#============================================
def test_invalid_log_format_rejected(monkeypatch):
	monkeypatch.setenv("CHEMSCAN_LOG_FORMAT", "xml")
	with pytest.raises(pydantic.ValidationError):
		settings.ChemScanSettings(_env_file=None)


# ============================================
# logging
# ============================================

#============================================
def test_build_logging_config_console():
	config = logging_config.build_logging_config(level="debug")
	assert config["loggers"]["chemscan"]["level"] == "DEBUG"
	assert config["handlers"]["default"]["formatter"] == "console"
	# the module default is untouched
	assert logging_config.DEFAULT_LOGGING_CONFIG["loggers"]["chemscan"]["level"] == "WARNING"


#============================================
def test_build_logging_config_json():
	config = logging_config.build_logging_config(log_format="json")
	assert config["handlers"]["default"]["formatter"] == "json"
	assert config["formatters"]["json"]["()"] == "pythonjsonlogger.json.JsonFormatter"


#============================================
def test_unknown_log_format():
	with pytest.raises(ValueError):
		logging_config.build_logging_config(log_format="xml")


#============================================
def test_configure_logging_sets_level():
	logging_config.configure_logging(level="INFO", log_format="json")
	logger = logging.getLogger("chemscan")
	assert logger.level == logging.INFO
	assert not logger.propagate
	handler = logger.handlers[0]
	assert type(handler.formatter).__name__ == "JsonFormatter"
	logging_config.configure_logging(level="WARNING")

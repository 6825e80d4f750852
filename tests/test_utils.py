import json
import logging
import logging.handlers

import pytest

from utils import config_section, load_config, setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_load_config_reads_json(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"particles": {"seed": 1}}))

    assert load_config(str(path)) == {"particles": {"seed": 1}}


def test_load_config_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "missing.json"))


def test_load_config_bad_json_raises(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{")

    with pytest.raises(json.JSONDecodeError):
        load_config(str(path))


def test_load_config_rejects_non_object(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("[1, 2]")

    with pytest.raises(ValueError):
        load_config(str(path))


def test_config_section():
    config = {"particles": {"seed": 3}, "broken": 5}

    assert config_section(config, "particles") == {"seed": 3}
    assert config_section(config, "absent") == {}
    with pytest.raises(ValueError):
        config_section(config, "broken")


def test_setup_logging_adds_console_and_rotating_file(tmp_path, restore_root_logger):
    log_file = tmp_path / "logs" / "backdrop.log"

    setup_logging({"logging": {"level": "debug", "log_file": str(log_file)}})

    root = restore_root_logger
    assert root.level == logging.DEBUG
    assert any(isinstance(h, logging.handlers.RotatingFileHandler) for h in root.handlers)
    assert log_file.exists()


def test_setup_logging_console_only(restore_root_logger):
    setup_logging({"logging": {"log_file": ""}})

    assert len(restore_root_logger.handlers) == 1

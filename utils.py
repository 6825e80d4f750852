# utils.py
"""
Utility functions for the backdrop application.

Logging setup and configuration loading live here; neither belongs to the
particle engine or to the window host.
"""
import logging
import logging.handlers
import json
import os
from typing import Dict, Any

# --- Data Contracts ---
#
# setup_logging(config: Dict[str, Any]) -> None:
#   - Inputs:
#     - config: A dictionary with an optional "logging" key holding "level",
#       "format", "log_file", "max_bytes" and "backup_count".
#   - Side Effects: Configures the root logger with a console handler and,
#     unless "log_file" is empty, a rotating file handler. Creates the log
#     directory if needed.
#
# load_config(path: str) -> Dict[str, Any]:
#   - Outputs: the parsed JSON object.
#   - Raises: FileNotFoundError, json.JSONDecodeError, ValueError if the
#     top level is not an object.
#
# config_section(config: Dict[str, Any], name: str) -> Dict[str, Any]:
#   - Outputs: config[name], or {} if absent.
#   - Raises: ValueError if the section is present but not an object.

def setup_logging(config: Dict[str, Any]) -> None:
    """
    Configures the logging system from a configuration dictionary.

    Logs go to the console and, when a log file is configured, to a
    rotating file.
    """
    log_config = config.get('logging', {})
    log_level = log_config.get('level', 'INFO').upper()
    log_format = log_config.get('format', '%(asctime)s - %(levelname)s - %(message)s')
    log_file_path = log_config.get('log_file', 'logs/backdrop.log')
    max_bytes = log_config.get('max_bytes', 1024 * 1024)
    backup_count = log_config.get('backup_count', 5)

    logger = logging.getLogger()
    logger.setLevel(log_level)

    # Clear existing handlers to avoid duplication
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(log_format)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file_path:
        log_dir = os.path.dirname(log_file_path)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_file_path, maxBytes=max_bytes, backupCount=backup_count
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logging.info("Logging system initialized.")
    logging.debug(f"Log level set to {log_level}.")
    logging.debug(f"Log file path: {log_file_path or '(console only)'}")


def load_config(path: str) -> Dict[str, Any]:
    """Loads a JSON configuration file."""
    logging.info(f"Loading configuration from {path}...")
    try:
        with open(path, 'r') as f:
            config = json.load(f)
    except FileNotFoundError:
        logging.error(f"Configuration file not found at {path}.")
        raise
    except json.JSONDecodeError:
        logging.error(f"Error decoding JSON from {path}.")
        raise

    if not isinstance(config, dict):
        msg = f"Configuration in {path} must be a JSON object, got {type(config).__name__}."
        logging.error(msg)
        raise ValueError(msg)
    logging.info("Configuration loaded successfully.")
    return config


def config_section(config: Dict[str, Any], name: str) -> Dict[str, Any]:
    section = config.get(name)
    if section is None:
        return {}
    if not isinstance(section, dict):
        msg = f"Configuration error: section '{name}' must be an object."
        logging.critical(msg)
        raise ValueError(msg)
    return section

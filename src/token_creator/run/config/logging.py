#!/usr/bin/env python3
"""
Logging bootstrap shared by the CLI and the web server.

Loads an INI file with logging.config.fileConfig(): logging.ini from the
working directory when present, otherwise the one shipped with the package.
LOG_LEVEL overrides the levels set in the file.
"""

import logging
import logging.config
import os
import sys
from pathlib import Path
from typing import Optional

DEFAULT_LEVEL = 'INFO'
LEVEL_NAMES = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')
PACKAGED_CONFIG = Path(__file__).parent / 'logging.ini'

# Loggers whose level follows LOG_LEVEL in addition to the root logger
OVERRIDDEN_LOGGERS = ['token_creator']


def find_logging_config(base_dir: Optional[Path] = None) -> Optional[Path]:
    """Return the INI file to load, or None when neither candidate exists."""
    local_config = Path(base_dir or Path.cwd()) / 'logging.ini'
    for candidate in (local_config, PACKAGED_CONFIG):
        if candidate.is_file():
            return candidate
    return None


def resolve_log_level() -> str:
    """
    Read LOG_LEVEL, falling back to INFO when unset or not a level name.

    The resolved name is written back to the environment so the INI file
    sees the same value.
    """
    requested = os.environ.get('LOG_LEVEL', DEFAULT_LEVEL).strip().upper()
    if requested not in LEVEL_NAMES:
        print(f"Warning: Invalid LOG_LEVEL '{requested}', using {DEFAULT_LEVEL}", file=sys.stderr)
        requested = DEFAULT_LEVEL
    os.environ['LOG_LEVEL'] = requested
    return requested


def _fallback(level: str):
    logging.basicConfig(
        level=level,
        format='%(levelname)s: %(name)s: %(message)s',
        stream=sys.stderr
    )


def _apply_level(level: str):
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers:
        if isinstance(handler, logging.StreamHandler):
            handler.setLevel(level)
    for logger_name in OVERRIDDEN_LOGGERS:
        logging.getLogger(logger_name).setLevel(level)


def bootstrap_logging(name: Optional[str] = None, base_dir: Optional[Path] = None) -> Optional[Path]:
    """
    Configure logging for an entry point.

    Args:
        name: Logger that reports which file was loaded (defaults to root)
        base_dir: Directory searched for a local logging.ini (defaults to cwd)

    Returns:
        The INI file that was loaded, or None when basicConfig was used.
    """
    level = resolve_log_level()
    config_path = find_logging_config(base_dir)

    if config_path is None:
        print("Warning: No logging.ini file found, using basic logging configuration", file=sys.stderr)
        _fallback(level)
        return None

    try:
        logging.config.fileConfig(str(config_path), disable_existing_loggers=False)
    except (OSError, ValueError, KeyError) as e:
        print(f"Warning: Failed to load logging config from {config_path}: {e}", file=sys.stderr)
        _fallback(level)
        return None

    _apply_level(level)
    logging.getLogger(name).debug(f"Logging configured from {config_path}")
    return config_path

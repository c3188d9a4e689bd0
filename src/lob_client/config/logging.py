#!/usr/bin/env python3
"""
Centralized logging configuration.

This module provides a bootstrap_logging function that can be imported from any entry point
to configure logging consistently, plus the stack-trace diagnostic used on every failed API call.
"""

import logging
import logging.config
import os
import sys
from pathlib import Path
from typing import Optional

VALID_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


def _find_logging_config() -> Optional[Path]:
    """
    Find the logging configuration file.

    Returns:
        Path to logging.ini in the current working directory, or None if not found.
    """
    current_dir_config = Path('logging.ini')
    if current_dir_config.exists():
        return current_dir_config
    return None


def _resolve_log_level() -> str:
    """
    Read LOG_LEVEL from the environment, defaulting to INFO.

    Invalid values are reported on stderr and replaced by INFO.
    """
    log_level = os.environ.get('LOG_LEVEL', 'INFO').strip().upper()
    if log_level not in VALID_LEVELS:
        print(f"Warning: Invalid LOG_LEVEL '{log_level}', using INFO", file=sys.stderr)
        return 'INFO'
    return log_level


def bootstrap_logging(name: Optional[str] = None) -> None:
    """
    Bootstrap logging configuration for the application.

    This function:
    1. Loads logging configuration from logging.ini using logging.config.fileConfig(), if present
    2. Falls back to logging.basicConfig() otherwise
    3. Applies the LOG_LEVEL environment variable to the root logger

    Args:
        name: Optional name for the logger that reports the bootstrap (defaults to root logger)
    """
    level = getattr(logging, _resolve_log_level())
    config_path = _find_logging_config()

    if config_path is None:
        logging.basicConfig(
            level=level,
            format='%(levelname)s: %(name)s: %(message)s',
            stream=sys.stderr
        )
    else:
        try:
            logging.config.fileConfig(
                str(config_path),
                disable_existing_loggers=False
            )
        except Exception as e:
            # Fallback to basic configuration if INI file is invalid
            print(f"Warning: Failed to load logging config from {config_path}: {e}", file=sys.stderr)
            logging.basicConfig(
                level=level,
                format='%(levelname)s: %(name)s: %(message)s',
                stream=sys.stderr
            )

    logging.getLogger().setLevel(level)
    logging.getLogger(name).debug(f"Logging configured from {config_path or 'defaults'}")


def log_stack_trace(logger: logging.Logger, error: Optional[BaseException]) -> None:
    """Log an error together with a snapshot of the current call stack."""
    if error is not None:
        logger.error(f"{type(error).__name__}: {error}", stack_info=True)
    else:
        logger.error("Stack trace requested without an error", stack_info=True)

"""Centralized logging configuration for the model schema exporter.

This module provides a configured logger instance that can be imported and used
throughout the application. Handlers are configured from logging_config.json
when setup_logger() is called by the command-line entry point.

Usage:
    from model_schema_export.logger import logger

    logger.info("This is an info message")
    logger.debug("This is a debug message")
"""

from .logger import logger, setup_logger

__all__ = ["logger", "setup_logger"]

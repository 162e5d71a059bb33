#!/usr/bin/env python3
"""
Progress observer for the retrieval pipeline.

The pipeline never prints. It reports progress to an observer; the default one
forwards everything to loguru, and the CLI swaps in an observer that renders
through Rich (see git_get.cli.formatters.ConsoleObserver).

Sample input:
    observer = ProgressObserver()
    observer.info("Repository: https://github.com/acme/tools.git")

Expected output:
    A loguru INFO record with the same message
"""

from loguru import logger


class ProgressObserver:
    """Receives human-readable progress messages from the pipeline."""

    def info(self, message: str) -> None:
        logger.info(message)

    def warning(self, message: str) -> None:
        logger.warning(message)

    def success(self, message: str) -> None:
        logger.success(message)

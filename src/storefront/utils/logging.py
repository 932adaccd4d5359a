"""Logging for the storefront client."""

import logging

import structlog

# Suppress noisy library loggers
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("httpcore").setLevel(logging.WARNING)


def get_logger(name: str):
    return structlog.get_logger(name)

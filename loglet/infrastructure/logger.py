"""
Internal diagnostics logger for Loglet.

This is not the user-facing console logger; it reports what the sinks do
(directories created, bytes written, failures swallowed) through the standard
``logging`` module so host applications can route it like any other library.
"""

import logging


LOGGER_NAME = "loglet"


def get_internal_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """Create or get the package logger with a plain stream handler."""
    internal = logging.getLogger(name)
    if internal.handlers:
        return internal

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s %(name)s %(levelname)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    internal.addHandler(handler)
    internal.setLevel(logging.INFO)
    internal.propagate = False
    return internal


logger = get_internal_logger()


__all__ = [
    "LOGGER_NAME",
    "get_internal_logger",
    "logger",
]

"""Logging setup for the dashboard process."""

from __future__ import annotations

import logging
import sys

from utility_dashboard.core.config import Settings

_HANDLER_NAME = "utility_dashboard"


def configure_logging(settings: Settings) -> None:
    """Attach a stream handler to the root logger using the configured level and format.

    Calling this more than once replaces the previously installed handler instead of
    stacking duplicates, so repeated ``create_app`` calls in tests stay quiet.
    """
    root = logging.getLogger()
    for handler in list(root.handlers):
        if handler.get_name() == _HANDLER_NAME:
            root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(settings.logging.format))
    root.addHandler(handler)
    root.setLevel(settings.log_level)


__all__ = ["configure_logging"]

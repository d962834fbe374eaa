from __future__ import annotations

import logging

from rich.logging import RichHandler

PACKAGE_LOGGER = "falling_blocks"


def _build_handler(use_rich: bool) -> logging.Handler:
    if not use_rich:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("[%(asctime)s] %(levelname)s %(name)s: %(message)s"))
        return handler
    handler = RichHandler(rich_tracebacks=True, show_path=False, markup=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    return handler


def setup_logger(*, name: str = PACKAGE_LOGGER, use_rich: bool = True, level: str = "info") -> logging.Logger:
    """Attach one handler to the package logger and return ``name``.

    Engine and env modules log through ``logging.getLogger(__name__)``, so they
    all end up on the package handler. Calling again replaces the handler.
    """
    root = logging.getLogger(PACKAGE_LOGGER)
    root.handlers.clear()
    root.propagate = False
    root.setLevel(getattr(logging, str(level).upper(), logging.INFO))
    root.addHandler(_build_handler(use_rich))
    return logging.getLogger(name)


__all__ = ["PACKAGE_LOGGER", "setup_logger"]

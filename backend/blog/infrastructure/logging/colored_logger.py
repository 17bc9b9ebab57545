"""Colored reconciliation logger — ANSI-colored console output for article sync.

Color scheme:
    🔵 Blue    — Directory scan
    🟢 Green   — Index writes
    🟡 Yellow  — Skipped entries
    🟣 Magenta — Renames
    🟠 Cyan    — File writes
    🔴 Red     — Errors
"""

import logging
from typing import Any


class _Colors:
    """ANSI escape codes for terminal colors."""

    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    BLUE = "\033[94m"
    MAGENTA = "\033[95m"
    CYAN = "\033[96m"
    GRAY = "\033[90m"


class ReconcileStage:
    """Predefined reconciliation stages with colors and icons."""

    SCAN = ("SCAN", _Colors.BLUE, "🔍")
    INDEX = ("INDEX", _Colors.GREEN, "🗂️")
    SKIP = ("SKIP", _Colors.YELLOW, "⏭️")
    RENAME = ("RENAME", _Colors.MAGENTA, "🔀")
    WRITE = ("WRITE", _Colors.CYAN, "💾")
    ERROR = ("ERROR", _Colors.RED, "❌")


def _format_details(kwargs: dict[str, Any]) -> str:
    details = " | ".join(f"{k}={v}" for k, v in kwargs.items())
    return f" {_Colors.GRAY}({details}){_Colors.RESET}"


class ReconcileLogger:
    """Color-coded logger for the article reconciliation engine.

    Usage:
        log = ReconcileLogger("ReconciliationEngine")
        log.step(ReconcileStage.SCAN, "Walking content root", entries=12)
        log.warn(ReconcileStage.SKIP, "No index.md", path="drafts")
    """

    def __init__(self, component_name: str):
        self._logger = logging.getLogger(component_name)

    def step(self, stage: tuple[str, str, str], message: str, **kwargs: Any) -> None:
        """Log a completed step at INFO in its stage color."""
        label, color, icon = stage
        formatted = (
            f"{color}{_Colors.BOLD}{icon} [{label}]{_Colors.RESET} "
            f"{color}{message}{_Colors.RESET}"
        )
        if kwargs:
            formatted += _format_details(kwargs)
        self._logger.info(formatted)

    def warn(self, stage: tuple[str, str, str], message: str, **kwargs: Any) -> None:
        """Log a degraded-but-continuing step at WARNING."""
        label, color, icon = stage
        formatted = f"{color}{icon} [{label}]{_Colors.RESET} {message}"
        if kwargs:
            formatted += _format_details(kwargs)
        self._logger.warning(formatted)

    def error(self, message: str, error: Exception | None = None, **kwargs: Any) -> None:
        """Log a failed step in red."""
        label, _, icon = ReconcileStage.ERROR
        formatted = (
            f"{_Colors.RED}{_Colors.BOLD}{icon} [{label}]{_Colors.RESET} "
            f"{_Colors.RED}{message}{_Colors.RESET}"
        )
        if error:
            formatted += f" {_Colors.DIM}→ {type(error).__name__}: {error}{_Colors.RESET}"
        if kwargs:
            formatted += _format_details(kwargs)
        self._logger.error(formatted)

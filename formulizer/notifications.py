from __future__ import annotations

import logging
from enum import Enum
from typing import Protocol

import gradio as gr

logger = logging.getLogger(__name__)


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"
    SUCCESS = "success"


class Notifier(Protocol):
    async def alert(self, message: str, severity: Severity, title: str) -> None:
        ...


class GradioNotifier:
    """Shows alerts as Gradio toasts in the session that triggered the event."""

    async def alert(self, message: str, severity: Severity, title: str) -> None:
        logger.info(f"Alert [{Severity(severity).value}] {title}: {message}")
        if severity in (Severity.ERROR, Severity.WARNING):
            gr.Warning(message, title=title)
        else:
            gr.Info(message, title=title)


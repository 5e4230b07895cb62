from __future__ import annotations

import logging
from typing import Optional

import gradio as gr
import pandas as pd

from .client import PlatformClient
from .config import settings
from .controller import FormController
from .exceptions import ClipboardError, ConfigurationError, EvaluationError, MetadataError
from .flattening import rows_to_table
from .notifications import GradioNotifier, Notifier
from .ux import COPY_ICON, SUCCESS_ICON, CopyIndicator, ModalState

logger = logging.getLogger(__name__)

ICON_GLYPHS = {COPY_ICON: "📋", SUCCESS_ICON: "✅"}


class UnavailableService:
    """Stands in for the platform client when the connection isn't configured."""

    def __init__(self, reason: str):
        self.reason = reason

    async def evaluate(self, request):
        raise EvaluationError(self.reason)

    async def list_queryable_objects(self):
        raise MetadataError(self.reason)


class FormulizerSession:
    """Per-browser-session state: the form controller plus the cosmetic widgets."""

    def __init__(self, service=None, notifier: Optional[Notifier] = None, revert_after: Optional[float] = None):
        notifier = notifier or GradioNotifier()
        if service is None:
            try:
                service = PlatformClient()
            except ConfigurationError as e:
                logger.error(f"Platform client unavailable: {e}")
                service = UnavailableService(str(e))
        self.controller = FormController(service, notifier)
        self.copy_indicator = CopyIndicator(
            notifier,
            settings.COPY_REVERT_SECONDS if revert_after is None else revert_after,
        )
        self.modal = ModalState()

    def close(self) -> None:
        self.copy_indicator.cancel()


def copy_button_label(indicator: CopyIndicator) -> str:
    return f"{ICON_GLYPHS.get(indicator.icon, '')} {indicator.message}".strip()


def results_frame(session: FormulizerSession) -> pd.DataFrame:
    headers, matrix = rows_to_table(session.controller.columns, session.controller.rows)
    return pd.DataFrame(matrix, columns=headers)


async def init_session_handler():
    session = FormulizerSession()
    await session.controller.initialize()
    controller = session.controller
    return (
        session,
        gr.update(choices=[(o['label'], o['value']) for o in controller.object_options]),
        gr.update(choices=[(o['label'], o['value']) for o in controller.return_type_options]),
        gr.update(interactive=controller.can_submit),
    )


def close_session(session: Optional[FormulizerSession]) -> None:
    if session is not None:
        session.close()


def field_change_handler(field_id: str, session: Optional[FormulizerSession], value):
    if session is None:
        return gr.update(interactive=False)
    return gr.update(interactive=session.controller.update_field(field_id, value))


async def formulize_handler(session: Optional[FormulizerSession]):
    if session is None:
        return gr.update(), "Session is still loading."

    status = await session.controller.submit()
    if status is None:
        return gr.update(), ""

    rows = session.controller.rows
    if rows is None:
        return gr.update(value=None, visible=False), "Evaluation failed."
    return gr.update(value=results_frame(session), visible=True), f"Records evaluated: {len(rows)}"


def browser_clipboard_writer(copy_error: Optional[str]):
    """Writer reporting the outcome of the copy button's js hook.

    The hook writes to navigator.clipboard and hands back an empty string on
    success or the browser's error message on failure.
    """
    async def write(text: str) -> None:
        if copy_error:
            raise ClipboardError(copy_error)
        logger.debug(f"Copied {len(text)} characters to the clipboard")

    return write


async def copy_formula_handler(session: Optional[FormulizerSession], formula: str, copy_error: Optional[str] = None):
    if session is None:
        return gr.update()
    await session.copy_indicator.copy(formula, browser_clipboard_writer(copy_error))
    return gr.update(value=copy_button_label(session.copy_indicator))


async def copy_revert_handler(session: Optional[FormulizerSession]):
    if session is None:
        return gr.update()
    await session.copy_indicator.wait_reverted()
    return gr.update(value=copy_button_label(session.copy_indicator))


def open_about_handler(session: Optional[FormulizerSession]):
    is_open = session.modal.open() if session is not None else True
    return gr.update(visible=is_open)


def close_about_handler(session: Optional[FormulizerSession]):
    is_open = session.modal.close() if session is not None else False
    return gr.update(visible=is_open)

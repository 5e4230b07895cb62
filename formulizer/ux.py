from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable, Optional

from .exceptions import ClipboardError
from .notifications import Notifier, Severity

logger = logging.getLogger(__name__)

COPY_ICON = 'utility:copy_to_clipboard'
SUCCESS_ICON = 'utility:success'
COPY_MESSAGE = 'Copy Formula!'
COPIED_MESSAGE = 'Formula Copied!'
EMPTY_FORMULA_PLACEHOLDER = 'No formula entered'
COPY_ERROR_TITLE = 'Copy Error'
COPY_ERROR_FALLBACK = 'Failed to copy formula'


def formula_to_copy(formula: Optional[str]) -> str:
    return formula or EMPTY_FORMULA_PLACEHOLDER


class CopyIndicator:
    """Icon/message pair for the copy button, with a timed revert.

    The pending revert is a task; cancel() drops it when the owner goes away.
    """

    def __init__(self, notifier: Notifier, revert_after: float = 2.0):
        self.notifier = notifier
        self.revert_after = revert_after
        self.icon = COPY_ICON
        self.message = COPY_MESSAGE
        self._revert_task: Optional[asyncio.Task] = None

    async def copy(self, formula: Optional[str], write: Callable[[str], Awaitable[None]]) -> bool:
        text = formula_to_copy(formula)
        self.message = COPIED_MESSAGE
        try:
            await write(text)
        except ClipboardError as e:
            logger.warning(f"Clipboard write failed: {e}")
            self.message = COPY_MESSAGE
            await self.notifier.alert(str(e) or COPY_ERROR_FALLBACK, Severity.ERROR, COPY_ERROR_TITLE)
            return False

        self.icon = SUCCESS_ICON
        self.cancel()
        self._revert_task = asyncio.ensure_future(self._revert_later())
        return True

    async def _revert_later(self) -> None:
        await asyncio.sleep(self.revert_after)
        self.icon = COPY_ICON
        self.message = COPY_MESSAGE

    async def wait_reverted(self) -> None:
        task = self._revert_task
        if task is None:
            return
        try:
            await task
        except asyncio.CancelledError:
            if not task.cancelled():
                raise

    def cancel(self) -> None:
        if self._revert_task is not None and not self._revert_task.done():
            self._revert_task.cancel()
        self._revert_task = None


class ModalState:
    def __init__(self):
        self.is_open = False

    def open(self) -> bool:
        self.is_open = True
        return self.is_open

    def close(self) -> bool:
        self.is_open = False
        return self.is_open

import asyncio

from formulizer.exceptions import ClipboardError
from formulizer.notifications import Severity
from formulizer.ux import (
    COPY_ERROR_TITLE,
    COPY_ICON,
    COPY_MESSAGE,
    COPIED_MESSAGE,
    SUCCESS_ICON,
    CopyIndicator,
    ModalState,
    formula_to_copy,
)


def test_formula_to_copy_placeholder():
    assert formula_to_copy('') == 'No formula entered'
    assert formula_to_copy(None) == 'No formula entered'
    assert formula_to_copy('Name') == 'Name'


def test_copy_success_then_revert(notifier):
    written = []

    async def write(text):
        written.append(text)

    async def scenario():
        indicator = CopyIndicator(notifier, revert_after=0.01)
        assert await indicator.copy('', write) is True
        during = (indicator.icon, indicator.message)
        await indicator.wait_reverted()
        return during, (indicator.icon, indicator.message)

    during, after = asyncio.run(scenario())
    assert written == ['No formula entered']
    assert during == (SUCCESS_ICON, COPIED_MESSAGE)
    assert after == (COPY_ICON, COPY_MESSAGE)
    assert notifier.alerts == []


def test_cancel_drops_pending_revert(notifier):
    async def write(text):
        pass

    async def scenario():
        indicator = CopyIndicator(notifier, revert_after=0.05)
        await indicator.copy('Name', write)
        indicator.cancel()
        await asyncio.sleep(0.1)
        await indicator.wait_reverted()
        return indicator.icon

    assert asyncio.run(scenario()) == SUCCESS_ICON


def test_copy_failure_alerts(notifier):
    async def write(text):
        raise ClipboardError('Clipboard permission denied')

    async def scenario():
        indicator = CopyIndicator(notifier, revert_after=0.01)
        ok = await indicator.copy('Name', write)
        return ok, indicator.icon

    ok, icon = asyncio.run(scenario())
    assert ok is False
    assert icon == COPY_ICON
    assert notifier.alerts == [('Clipboard permission denied', Severity.ERROR, COPY_ERROR_TITLE)]


def test_copy_failure_without_message_uses_fallback(notifier):
    async def write(text):
        raise ClipboardError()

    asyncio.run(CopyIndicator(notifier).copy('Name', write))
    assert notifier.alerts[0][0] == 'Failed to copy formula'


def test_modal_toggle():
    modal = ModalState()
    assert modal.is_open is False
    assert modal.open() is True
    assert modal.close() is False

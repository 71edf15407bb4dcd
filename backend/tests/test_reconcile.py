import asyncio
from datetime import datetime

import pytest

from client.notifications import ToastQueue, Variant
from client.reconcile import Modal, reconcile
from client.store import OptimisticStore
from domain.models import Failure, MutationAction, Quote, Success

STAMP = datetime(2024, 5, 1, 12, 0, 0)


def _quote(content="Fear is the mind-killer."):
    return Quote(
        id="Q1", user_id="u1", content=content, page=8, book_id="B1", created_at=STAMP, updated_at=STAMP
    )


def test_success_closes_refreshes_and_notifies():
    modal = Modal()
    modal.open()
    toasts = ToastQueue()
    refreshed = []

    async def refresh():
        refreshed.append(True)

    note = asyncio.run(
        reconcile(
            MutationAction.UPDATE,
            Success(),
            label="Quote",
            surface=modal,
            refresh=refresh,
            notify=toasts,
        )
    )

    assert not modal.is_open
    assert refreshed == [True]
    assert note.title == "Success"
    assert note.description == "Quote updated!"
    assert toasts.visible == [note]
    assert note.variant == Variant.DEFAULT


def test_failure_rolls_back_and_reopens_with_attempt():
    store = OptimisticStore(_quote())
    modal = Modal()
    attempted = _quote("I must not fear.")
    store.rollback(attempted)

    note = asyncio.run(
        reconcile(
            MutationAction.UPDATE,
            Failure(message="Quote not found", values=_quote(), attempted=attempted),
            label="Quote",
            store=store,
            surface=modal,
        )
    )

    assert store.value == _quote()
    assert modal.is_open
    assert modal.values == attempted
    assert note.title == "Failed to update"
    assert note.description == "Quote not found"
    assert note.variant == Variant.DESTRUCTIVE


def test_failure_without_message_falls_back():
    note = asyncio.run(reconcile(MutationAction.DELETE, Failure(message=""), label="Quote"))
    assert note.description == "Error"


def test_unknown_result_is_rejected():
    with pytest.raises(TypeError):
        asyncio.run(reconcile(MutationAction.CREATE, None, label="Quote"))  # type: ignore[arg-type]


def test_repeated_calls_are_independent():
    toasts = ToastQueue()
    for _ in range(3):
        asyncio.run(reconcile(MutationAction.CREATE, Success(), label="Quote", notify=toasts))
    assert [n.description for n in toasts.visible] == ["Quote created!"] * 3


def test_failed_refresh_is_logged_and_success_still_reported(caplog):
    toasts = ToastQueue()
    done = []

    async def refresh():
        raise ConnectionError("refresh failed")

    note = asyncio.run(
        reconcile(
            MutationAction.UPDATE,
            Success(),
            label="Quote",
            refresh=refresh,
            notify=toasts,
            post_success=lambda: done.append(True),
        )
    )

    assert note.description == "Quote updated!"
    assert toasts.visible == [note]
    assert done == [True]
    assert "refresh after Quote update failed" in caplog.text

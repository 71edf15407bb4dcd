from datetime import datetime

from domain.models import OPTIMISTIC_ID, Book, MutationAction, PendingMutation
from client.store import OptimisticListStore, OptimisticStore, merge_entity

STAMP = datetime(2024, 5, 1, 12, 0, 0)


def _book(**kw):
    defaults = dict(
        id="B1",
        user_id="u1",
        title="Dune",
        completed=False,
        author_id="A1",
        created_at=STAMP,
        updated_at=STAMP,
    )
    defaults.update(kw)
    return Book(**defaults)


def test_update_publishes_new_value_to_subscribers():
    store = OptimisticStore(_book())
    seen = []
    store.subscribe(seen.append)

    store.apply(PendingMutation(MutationAction.UPDATE, _book(title="Dune Messiah")))

    assert store.value.title == "Dune Messiah"
    assert store.base.title == "Dune"
    assert [b.title for b in seen] == ["Dune Messiah"]


def test_unsubscribe_stops_notifications():
    store = OptimisticStore(_book())
    seen = []
    unsubscribe = store.subscribe(seen.append)
    unsubscribe()
    store.apply(PendingMutation(MutationAction.UPDATE, _book(title="x")))
    assert seen == []


def test_values_are_copies():
    original = _book()
    store = OptimisticStore(original)
    original.title = "changed outside"
    shown = store.value
    shown.title = "changed by reader"
    assert store.value.title == "Dune"


def test_delete_shows_last_known_value():
    store = OptimisticStore(_book(title="Old"))
    store.apply(PendingMutation(MutationAction.DELETE, _book(title="Old")))
    assert store.value.title == "Old"


def test_rollback_and_set_base():
    store = OptimisticStore(_book())
    store.apply(PendingMutation(MutationAction.UPDATE, _book(title="New")))
    store.rollback(_book())
    assert store.value == _book()

    store.set_base(_book(title="Server"))
    assert store.value.title == "Server"
    assert store.base.title == "Server"


def test_rollback_without_values_shows_base():
    store = OptimisticStore(_book())
    store.apply(PendingMutation(MutationAction.CREATE, _book(id=OPTIMISTIC_ID, title="New")))
    store.rollback(None)
    assert store.value == _book()


def test_default_timestamps_are_naive_utc():
    book = Book(id="B9")
    assert book.created_at.tzinfo is None
    assert book.updated_at.tzinfo is None


def test_merge_entity_without_previous_is_copy():
    data = _book()
    merged = merge_entity(None, data)
    assert merged == data
    assert merged is not data


def test_list_store_create_appends_sentinel_entity():
    store = OptimisticListStore([_book()])
    store.apply(PendingMutation(MutationAction.CREATE, _book(id="", title="Children of Dune")))
    items = store.items
    assert [b.title for b in items] == ["Dune", "Children of Dune"]
    assert items[-1].id == OPTIMISTIC_ID


def test_list_store_update_and_delete_by_id():
    store = OptimisticListStore([_book(), _book(id="B2", title="Other")])
    store.apply(PendingMutation(MutationAction.UPDATE, _book(title="Dune (revised)")))
    assert [b.title for b in store.items] == ["Dune (revised)", "Other"]

    store.apply(PendingMutation(MutationAction.DELETE, _book(id="B2")))
    assert [b.id for b in store.items] == ["B1"]


def test_list_store_rollback_restores_base():
    store = OptimisticListStore([_book()])
    store.apply(PendingMutation(MutationAction.DELETE, _book()))
    assert store.items == []

    store.rollback(_book())
    assert store.items == [_book()]

    store.apply(PendingMutation(MutationAction.CREATE, _book(id=OPTIMISTIC_ID)))
    store.rollback(None)
    assert [b.id for b in store.items] == ["B1"]

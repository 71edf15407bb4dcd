from unittest.mock import patch

from sqlalchemy.exc import SQLAlchemyError

from domain.models import OPTIMISTIC_ID, Quote, Reflection, Review
from domain.resources import BOOKS, QUOTES
from services import actions, queries
from services.auth import AuthSession


def test_create_book_assigns_real_id(seeded, auth):
    error = actions.create_book_action({"title": "Dune Messiah", "completed": True, "author_id": "A1"}, auth)
    assert error is None

    books = queries.get_books(auth, author_id="A1")
    assert [b.title for b in books] == ["Dune", "Dune Messiah"]
    created = books[1]
    assert created.id not in ("", OPTIMISTIC_ID)
    assert created.user_id == "u1"
    assert created.completed is True


def test_create_book_revalidates_input(seeded, auth):
    error = actions.create_book_action({"title": "", "author_id": "A1"}, auth)
    assert error == "title: required"
    assert len(queries.get_books(auth)) == 1


def test_create_book_requires_owned_author(seeded):
    other = AuthSession(user_id="u2")
    error = actions.create_book_action({"title": "Dune", "author_id": "A1"}, other)
    assert error == "Author not found"


def test_author_names_are_unique_per_user(seeded, auth):
    assert actions.create_author_action({"name": "Frank Herbert"}, auth) == "Author 'Frank Herbert' already exists"
    assert actions.create_author_action({"name": "Frank Herbert"}, AuthSession(user_id="u2")) is None
    assert actions.update_author_action({"id": "A1", "name": "Frank Herbert"}, auth) is None


def test_update_book_keeps_created_at(seeded, auth):
    before = seeded["book"]
    error = actions.update_book_action({"id": "B1", "title": "Dune (1965)", "completed": "true", "author_id": "A1"}, auth)
    assert error is None

    after = queries.get_entity_by_id(BOOKS, auth, "B1")
    assert after.title == "Dune (1965)"
    assert after.completed is True
    assert after.created_at == before.created_at
    assert after.updated_at >= before.updated_at


def test_update_leaves_omitted_fields_alone(seeded, session_factory, auth):
    with session_factory() as session:
        queries.quotes_repo.create(session, Quote(id="Q1", user_id="u1", content="Fear", page=8, book_id="B1"))

    assert actions.update_quote_action({"id": "Q1", "content": "Fear is the mind-killer.", "book_id": "B1"}, auth) is None
    assert actions.update_book_action({"id": "B1", "title": "Dune", "completed": True, "author_id": "A1"}, auth) is None
    assert actions.update_book_action({"id": "B1", "title": "Dune (1965)", "author_id": "A1"}, auth) is None

    quote = queries.get_entity_by_id(QUOTES, auth, "Q1")
    assert quote.content == "Fear is the mind-killer."
    assert quote.page == 8
    assert queries.get_entity_by_id(BOOKS, auth, "B1").completed is True


def test_update_missing_book(session_factory, auth):
    error = actions.update_book_action({"id": "nope", "title": "x", "author_id": "A1"}, auth)
    assert error == "Book not found"


def test_delete_book_cascades(seeded, session_factory, auth):
    with session_factory() as session:
        queries.quotes_repo.create(session, Quote(id="Q1", user_id="u1", content="Fear", book_id="B1"))
        queries.reflections_repo.create(session, Reflection(id="F1", user_id="u1", content="Hmm", book_id="B1"))
        queries.reviews_repo.create(session, Review(id="R1", user_id="u1", content="Great", book_id="B1"))

    assert actions.delete_book_action("B1", auth) is None

    data = queries.get_book_by_id_with_quotes_and_reflections(auth, "B1")
    assert data.book is None
    assert queries.get_reviews(auth) == []
    with session_factory() as session:
        assert queries.quotes_repo.list(session, "u1") == []
        assert queries.reflections_repo.list(session, "u1") == []


def test_delete_author_cascades_to_books(seeded, auth):
    assert actions.delete_author_action("A1", auth) is None
    assert queries.get_books(auth) == []


def test_delete_missing_returns_error(session_factory, auth):
    assert actions.delete_quote_action("Q404", auth) == "Quote not found"


def test_database_failure_becomes_generic_error(seeded, auth):
    with patch.object(queries.books_repo, "create", side_effect=SQLAlchemyError("disk full")):
        error = actions.create_book_action({"title": "Dune", "author_id": "A1"}, auth)
    assert error == actions.GENERIC_ERROR


def test_reads_are_scoped_to_user(seeded):
    assert queries.get_books(AuthSession(user_id="u2")) == []
    assert queries.get_entity_by_id(BOOKS, AuthSession(user_id="u2"), "B1") is None


def test_book_with_relations_reports_review(seeded, auth):
    assert actions.create_review_action({"content": "A classic", "book_id": "B1"}, auth) is None
    data = queries.get_book_by_id_with_quotes_and_reflections(auth, "B1")
    assert data.has_review
    assert data.reviews[0].content == "A classic"
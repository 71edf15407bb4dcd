import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from api.routes import authors, books, entities, nav, reviews

HEADERS = {"X-User-Id": "u1"}


@pytest.fixture
def client(session_factory):
    app = FastAPI()
    app.include_router(entities.router, prefix="/api")
    app.include_router(books.router, prefix="/books")
    app.include_router(authors.router, prefix="/authors")
    app.include_router(reviews.router, prefix="/reviews")
    app.include_router(nav.router, prefix="/nav")
    return TestClient(app)


def test_pages_require_auth(client, seeded):
    assert client.get("/books/B1").status_code == 401
    assert client.get("/api/books").status_code == 401
    assert client.post("/api/books", json={"title": "x", "author_id": "A1"}).status_code == 401


def test_auth_cookie_is_accepted(client, seeded):
    client.cookies.set("user_id", "u1")
    assert client.get("/books/B1").status_code == 200


def test_missing_book_is_not_found(client, seeded):
    resp = client.get("/books/nope", headers=HEADERS)
    assert resp.status_code == 404
    assert resp.json()["detail"] == "Book not found"


def test_book_page_payload(client, seeded):
    resp = client.get("/books/B1", headers=HEADERS)
    assert resp.status_code == 200
    data = resp.json()
    assert data["book"]["title"] == "Dune"
    assert [a["name"] for a in data["authors"]] == ["Frank Herbert"]
    assert data["has_review"] is False
    assert data["review_prompt"] is None
    assert data["back_path"] == "/books"


def test_completed_book_without_review_asks_for_one(client, seeded):
    client.put("/api/books/B1", json={"title": "Dune", "completed": True, "author_id": "A1"}, headers=HEADERS)
    data = client.get("/books/B1", headers=HEADERS).json()
    assert data["review_prompt"] == "Write a review about Dune"

    client.post("/api/reviews", json={"content": "Loved it", "book_id": "B1"}, headers=HEADERS)
    data = client.get("/books/B1", headers=HEADERS).json()
    assert data["has_review"] is True
    assert data["review_prompt"] is None
    assert data["reviews"][0]["content"] == "Loved it"


def test_nested_book_page(client, seeded):
    resp = client.get("/authors/A1/books/B1", headers=HEADERS)
    assert resp.status_code == 200
    assert resp.json()["back_path"] == "/authors/A1"
    assert client.get("/authors/A2/books/B1", headers=HEADERS).status_code == 404


def test_author_page_lists_books(client, seeded):
    data = client.get("/authors/A1", headers=HEADERS).json()
    assert data["author"]["name"] == "Frank Herbert"
    assert [b["id"] for b in data["books"]] == ["B1"]


def test_mutation_round_trip(client, seeded):
    resp = client.post("/api/books", json={"title": "Dune Messiah", "completed": "on", "author_id": "A1"}, headers=HEADERS)
    assert resp.status_code == 200
    assert resp.json() == {"error": None}

    listed = client.get("/api/books", params={"author_id": "A1"}, headers=HEADERS).json()
    assert [b["title"] for b in listed] == ["Dune", "Dune Messiah"]

    resp = client.delete("/api/books/B1", headers=HEADERS)
    assert resp.json() == {"error": None}
    resp = client.delete("/api/books/B1", headers=HEADERS)
    assert resp.json() == {"error": "Book not found"}
    assert client.get("/api/books/B1", headers=HEADERS).status_code == 404


def test_mutation_validation_error_is_payload(client, seeded):
    resp = client.post("/api/reviews", json={"content": "", "book_id": "B1"}, headers=HEADERS)
    assert resp.status_code == 200
    assert resp.json()["error"] == "content: required"


def test_unknown_resource(client, seeded):
    assert client.get("/api/widgets", headers=HEADERS).status_code == 404


def test_review_page(client, seeded):
    client.post("/api/reviews", json={"content": "Loved it", "book_id": "B1"}, headers=HEADERS)
    review_id = client.get("/api/reviews", headers=HEADERS).json()[0]["id"]
    data = client.get(f"/reviews/{review_id}", headers=HEADERS).json()
    assert data["review"]["content"] == "Loved it"
    assert data["back_path"] == "/reviews"
    assert client.get("/reviews/missing", headers=HEADERS).status_code == 404


def test_nav(client):
    data = client.get("/nav").json()
    assert [link["title"] for link in data["default_links"]] == ["Home", "Account", "Settings"]
    assert data["additional_links"][0]["title"] == "Entities"
    assert [link["href"] for link in data["additional_links"][0]["links"]] == ["/reviews", "/books", "/authors"]

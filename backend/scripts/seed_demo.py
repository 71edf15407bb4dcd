"""Seed a small demo shelf for one user.

Usage:
    python -m scripts.seed_demo --user demo

Goes through the same mutation actions the forms use, so every record is
validated exactly as a user submission would be.
"""

from __future__ import annotations

import argparse
import logging
import sys

from db import init_db
from services import actions, queries
from services.auth import AuthSession

LOG = logging.getLogger("seed_demo")

DEMO_SHELF = {
    "Frank Herbert": [("Dune", True), ("Dune Messiah", False)],
    "Ursula K. Le Guin": [("The Left Hand of Darkness", True)],
}


def seed(auth: AuthSession) -> int:
    """Create the demo authors and books; returns the number of failures."""
    failures = 0
    for name, books in DEMO_SHELF.items():
        error = actions.create_author_action({"name": name}, auth)
        if error:
            LOG.warning("author %s: %s", name, error)
        author = next((a for a in queries.get_authors(auth) if a.name == name), None)
        if author is None:
            failures += 1
            continue
        for title, completed in books:
            error = actions.create_book_action(
                {"title": title, "completed": completed, "author_id": author.id}, auth
            )
            if error:
                LOG.warning("book %s: %s", title, error)
                failures += 1
    return failures


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--user", default="demo", help="user id owning the demo records")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    init_db()
    auth = AuthSession(user_id=args.user)
    failures = seed(auth)
    books = queries.get_books(auth)
    LOG.info("Shelf for %s now holds %d books", args.user, len(books))
    print(f"Books: {len(books)}")
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())

from .authors import AuthorsRepository
from .books import BooksRepository
from .reviews import ReviewsRepository
from .quotes import QuotesRepository
from .reflections import ReflectionsRepository
from . import models

__all__ = [
    "AuthorsRepository",
    "BooksRepository",
    "ReviewsRepository",
    "QuotesRepository",
    "ReflectionsRepository",
    "models",
]

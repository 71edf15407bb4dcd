"""
SQLAlchemy ORM models for persistence.
"""
from datetime import datetime
from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import relationship

from db import Base


class AuthorORM(Base):
    __tablename__ = "authors"
    __table_args__ = (UniqueConstraint("user_id", "name", name="uq_authors_user_name"),)

    id = Column(String, primary_key=True, index=True)
    name = Column(String, nullable=False)
    user_id = Column(String, nullable=False, index=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    books = relationship(
        "BookORM",
        back_populates="author",
        cascade="all, delete-orphan",
    )


class BookORM(Base):
    __tablename__ = "books"

    id = Column(String, primary_key=True, index=True)
    title = Column(String, nullable=False)
    completed = Column(Boolean, default=False, nullable=False)
    author_id = Column(String, ForeignKey("authors.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(String, nullable=False, index=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    author = relationship("AuthorORM", back_populates="books")
    reviews = relationship("ReviewORM", back_populates="book", cascade="all, delete-orphan")
    quotes = relationship("QuoteORM", back_populates="book", cascade="all, delete-orphan")
    reflections = relationship(
        "ReflectionORM", back_populates="book", cascade="all, delete-orphan"
    )


class ReviewORM(Base):
    __tablename__ = "reviews"

    id = Column(String, primary_key=True, index=True)
    content = Column(Text, nullable=False)
    book_id = Column(String, ForeignKey("books.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(String, nullable=False, index=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    book = relationship("BookORM", back_populates="reviews")


class QuoteORM(Base):
    __tablename__ = "quotes"

    id = Column(String, primary_key=True, index=True)
    content = Column(Text, nullable=False)
    page = Column(Integer, nullable=True)
    book_id = Column(String, ForeignKey("books.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(String, nullable=False, index=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    book = relationship("BookORM", back_populates="quotes")


class ReflectionORM(Base):
    __tablename__ = "reflections"

    id = Column(String, primary_key=True, index=True)
    content = Column(Text, nullable=False)
    book_id = Column(String, ForeignKey("books.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(String, nullable=False, index=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    book = relationship("BookORM", back_populates="reflections")

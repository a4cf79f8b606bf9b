"""Business operations on books."""

from __future__ import annotations

from typing import Any

from bookshelf_api.models import Book


class BookNotFoundError(LookupError):
    """Raised when a requested book does not exist."""


class BookService:
    """Book operations backed by a repository."""

    def __init__(self, repo: Any) -> None:
        self._repo = repo

    def get_books(self) -> list[Book]:
        return self._repo.get_all_books()

    def get_book_by_id(self, book_id: str) -> Book:
        """Return the book; raises BookNotFoundError if it is absent."""
        try:
            return self._repo.get_book_by_id(book_id)
        except BookNotFoundError:
            raise
        except LookupError as exc:
            raise BookNotFoundError(str(exc)) from exc

    def add_book(self, book: Book) -> Book:
        return self._repo.create_book(book)

    def update_book(self, book: Book) -> Book:
        return self._repo.update_book(book)

    def delete_book_by_id(self, book_id: str) -> None:
        """Delete the book; raises BookNotFoundError if nothing was deleted."""
        if not self._repo.remove_book_by_id(book_id):
            raise BookNotFoundError("libro no encontrado")
"""Book storage on a MongoDB collection."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from bson import ObjectId
from pymongo import MongoClient

from bookshelf_api.models import Book, _object_id_from_hex

DATABASE_NAME = "library"
COLLECTION_NAME = "books"

_NIL_ID = ObjectId(b"\x00" * 12)


class BookRepository:
    """Reads and writes books in a collection."""

    def __init__(self, collection: Any) -> None:
        self._collection = collection

    @classmethod
    def from_env(cls) -> BookRepository:
        """Connect using the MONGO_URI environment variable."""
        mongo_uri = os.environ.get("MONGO_URI", "")
        if not mongo_uri:
            raise RuntimeError("MONGO_URI not set in environment")
        client: MongoClient = MongoClient(mongo_uri)
        return cls(client[DATABASE_NAME][COLLECTION_NAME])

    def _find(self, query: dict[str, Any]) -> list[Book]:
        return [Book.from_document(document) for document in self._collection.find(query)]

    def get_all_books(self) -> list[Book]:
        """Return every stored book."""
        return self._find({})

    def create_book(self, book: Book) -> Book:
        """Store a copy of ``book`` under a fresh id and return that copy."""
        stored = dataclasses.replace(book, id=ObjectId())
        self._collection.insert_one(stored.to_document())
        return stored

    def get_book_by_id(self, book_id: str) -> Book:
        """Return the book with the given hex id.

        Raises ValueError for a malformed id and LookupError if absent.
        """
        object_id = _object_id_from_hex(book_id)
        document = self._collection.find_one({"_id": object_id})
        if document is None:
            raise LookupError("mongo: no documents in result")
        return Book.from_document(document)

    def update_book(self, book: Book) -> Book:
        """Overwrite the stored fields of ``book`` and return it."""
        object_id = book.id if book.id is not None else _NIL_ID
        self._collection.update_one({"_id": object_id}, {"$set": book.to_document()})
        return book

    def remove_book_by_id(self, book_id: str) -> bool:
        """Delete the book with the given hex id; report whether one was removed."""
        object_id = _object_id_from_hex(book_id)
        result = self._collection.delete_one({"_id": object_id})
        return result.deleted_count > 0

    def get_books_by_author(self, author: str) -> list[Book]:
        """Return the books whose author is exactly ``author``."""
        return self._find({"author": author})
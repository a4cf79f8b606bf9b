"""The book record and its JSON and document representations."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Mapping

from bson import ObjectId

_HEX_ID = re.compile(r"[0-9a-fA-F]{24}")
_NIL_ID = ObjectId(b"\x00" * 12)
_STRING_FIELDS = ("title", "isbn", "author")


def _object_id_from_hex(value: str) -> ObjectId:
    """Parse a 24-character hex string into an ObjectId, raising ValueError."""
    if not isinstance(value, str) or not _HEX_ID.fullmatch(value):
        raise ValueError("the provided hex string is not a valid ObjectID")
    return ObjectId(value)


def _parse_json_id(value: Any) -> ObjectId | None:
    if isinstance(value, Mapping):
        if "$oid" not in value:
            raise ValueError("not an extended JSON ObjectID")
        value = value["$oid"]
    if not isinstance(value, str):
        raise ValueError("not an extended JSON ObjectID")
    if value == "":
        return None
    if len(value) != 24:
        raise ValueError(f"cannot unmarshal into an ObjectID, the length must be 24 but it is {len(value)}")
    object_id = _object_id_from_hex(value)
    return None if object_id == _NIL_ID else object_id


@dataclass
class Book:
    """A book in the library; ``id`` is None until the book is stored."""

    id: ObjectId | None = None
    title: str = ""
    isbn: str = ""
    author: str = ""

    @classmethod
    def from_json(cls, data: Any) -> Book:
        """Build a book from decoded JSON, matching keys case-insensitively.

        Unknown keys and null values are ignored; a value of the wrong type
        raises ValueError.
        """
        book = cls()
        if data is None:
            return book
        if not isinstance(data, Mapping):
            raise ValueError("cannot decode a book from a non-object JSON value")
        for key, value in data.items():
            name = key.lower() if isinstance(key, str) else None
            if value is None:
                continue
            if name == "id":
                book.id = _parse_json_id(value)
            elif name in _STRING_FIELDS:
                if not isinstance(value, str):
                    raise ValueError(f"field {name!r} must be a string")
                setattr(book, name, value)
        return book

    def to_json(self) -> dict[str, str]:
        """Return the JSON object for this book; a missing id is all zeros."""
        return {
            "id": str(self.id if self.id is not None else _NIL_ID),
            "title": self.title,
            "isbn": self.isbn,
            "author": self.author,
        }

    @classmethod
    def from_document(cls, document: Mapping[str, Any]) -> Book:
        """Build a book from a stored document."""
        object_id = document.get("_id")
        if object_id is not None and not isinstance(object_id, ObjectId):
            raise ValueError("field '_id' must be an ObjectId")
        values = {}
        for name in _STRING_FIELDS:
            value = document.get(name)
            if value is None:
                value = ""
            elif not isinstance(value, str):
                raise ValueError(f"field {name!r} must be a string")
            values[name] = value
        return cls(id=None if object_id == _NIL_ID else object_id, **values)

    def to_document(self) -> dict[str, Any]:
        """Return the document to store; ``_id`` is left out when unset."""
        document: dict[str, Any] = {}
        if self.id is not None and self.id != _NIL_ID:
            document["_id"] = self.id
        document.update(title=self.title, isbn=self.isbn, author=self.author)
        return document
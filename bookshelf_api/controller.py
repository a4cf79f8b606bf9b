"""HTTP handlers for the book endpoints."""

from __future__ import annotations

import json
from typing import Any, Iterable

from flask import Response, request

from bookshelf_api.models import Book, _object_id_from_hex

_JSON_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON literal {name!r}")


_DECODER = json.JSONDecoder(parse_constant=_reject_constant)


def _encode(payload: Any) -> str:
    text = json.dumps(payload, ensure_ascii=False, separators=(",", ":"))
    for char, escape in _JSON_ESCAPES.items():
        text = text.replace(char, escape)
    return text + "\n"


def _json_response(payload: Any, status: int = 200) -> Response:
    return Response(_encode(payload), status=status, content_type="application/json")


def _error(message: str, status: int) -> Response:
    return Response(
        message + "\n",
        status=status,
        content_type="text/plain; charset=utf-8",
        headers={"X-Content-Type-Options": "nosniff"},
    )


def _book_list(books: Iterable[Book] | None) -> list[dict[str, str]] | None:
    encoded = [book.to_json() for book in books or ()]
    return encoded or None


def _decode_book() -> Book:
    """Decode the first JSON value of the request body into a book."""
    text = request.get_data().decode("utf-8", errors="replace").lstrip(" \t\r\n")
    if not text:
        raise ValueError("empty request body")
    value, _ = _DECODER.raw_decode(text)
    return Book.from_json(value)


class BookController:
    """Turns HTTP requests into service calls and service results into responses."""

    def __init__(self, service: Any) -> None:
        self.service = service

    def get_books(self) -> Response:
        try:
            books = self.service.get_books()
        except Exception:
            return _error("Error al obtener libros", 500)
        return _json_response(
            {"books": _book_list(books), "message": "Libros obtenidos correctamente"}
        )

    def create_book(self) -> Response:
        try:
            book = _decode_book()
        except ValueError:
            return _error("Datos inválidos", 400)
        try:
            new_book = self.service.add_book(book)
        except Exception:
            return _error("Error al insertar libro", 500)
        return _json_response(new_book.to_json(), status=201)

    def get_book_by_id(self, id: str) -> Response:
        if not id:
            return _error("ID no proporcionado", 400)
        try:
            book = self.service.get_book_by_id(id)
        except Exception:
            return _error("Libro no encontrado", 404)
        return _json_response({"book": book.to_json(), "message": "Libro encontrado"})

    def update_book(self, id: str) -> Response:
        try:
            book = _decode_book()
        except ValueError:
            return _error("Datos inválidos", 400)
        try:
            book.id = _object_id_from_hex(id)
        except ValueError:
            return _error("ID inválido", 400)
        try:
            updated = self.service.update_book(book)
        except Exception:
            return _error("Error al actualizar libro", 500)
        return _json_response(
            {"book": updated.to_json(), "message": "Libro actualizado correctamente"}
        )

    def delete_book(self, id: str) -> Response:
        return self.delete_book_by_id(id)

    def delete_book_by_id(self, id: str) -> Response:
        if not id:
            return _error("ID no proporcionado", 400)
        try:
            self.service.delete_book_by_id(id)
        except Exception:
            return _error("Error al eliminar libro", 500)
        return Response(status=204)
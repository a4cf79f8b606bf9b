"""Application wiring and the server entry point."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from dotenv import load_dotenv
from flask import Flask

from bookshelf_api.controller import BookController
from bookshelf_api.repository import BookRepository
from bookshelf_api.service import BookService

PORT = 8080


def create_app(controller: BookController) -> Flask:
    """Build the web application routing the book endpoints to ``controller``."""
    app = Flask(__name__)
    app.add_url_rule("/books", "get_books", controller.get_books, methods=["GET"])
    app.add_url_rule("/books", "create_book", controller.create_book, methods=["POST"])
    app.add_url_rule(
        "/books/<id>", "get_book_by_id", controller.get_book_by_id, methods=["GET"]
    )
    app.add_url_rule("/books/<id>", "update_book", controller.update_book, methods=["PUT"])
    app.add_url_rule(
        "/books/<id>", "delete_book_by_id", controller.delete_book_by_id, methods=["DELETE"]
    )
    return app


def main(argv: Sequence[str] | None = None) -> int:
    """Connect to the database and serve the API on port 8080."""
    parser = argparse.ArgumentParser(description="Serve the book API.")
    parser.parse_args(argv)
    load_dotenv()
    try:
        repo = BookRepository.from_env()
    except RuntimeError as exc:
        print(exc, file=sys.stderr)
        return 1
    app = create_app(BookController(BookService(repo)))
    print(f"Servidor en el puerto {PORT}...")
    app.run(host="0.0.0.0", port=PORT)
    return 0


if __name__ == "__main__":
    sys.exit(main())
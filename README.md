# bookshelf-api

A small HTTP service that keeps a library of books in MongoDB and serves them as JSON.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Configuration

The service reads its settings from the environment. If there is a `.env` file, it is loaded at start-up by `python-dotenv`.

| Variable    | Meaning                              |
|-------------|--------------------------------------|
| `MONGO_URI` | MongoDB connection string (required) |

Books are stored in the `books` collection of the `library` database.

Example `.env`:

```
MONGO_URI=mongodb://localhost:27017
```

## Running

```
bookshelf-api
```

The command takes no options other than `--help`. It listens on port 8080 on all interfaces, using Flask's built-in server. If `MONGO_URI` is unset or empty, it prints `MONGO_URI not set in environment` to standard error and exits with status 1.

## Endpoints

| Method | Path          | Description             | Success status |
|--------|---------------|-------------------------|----------------|
| GET    | `/books`      | List all books          | 200            |
| POST   | `/books`      | Create a book           | 201            |
| GET    | `/books/<id>` | Fetch one book          | 200            |
| PUT    | `/books/<id>` | Replace a book's fields | 200            |
| DELETE | `/books/<id>` | Delete a book           | 204            |

A book is a JSON object:

```json
{"id": "507f191e810c19729de860ea", "title": "Go Programming", "isbn": "1234567890", "author": "John Doe"}
```

`id` is a 24-character hexadecimal ObjectId. A book with no id is written with an all-zero id.

### Response bodies

- `GET /books` returns `{"books": [...], "message": "Libros obtenidos correctamente"}`. If there are no books, `books` is `null`.
- `POST /books` returns the created book object. The server always assigns a new `id`, and any `id` in the request body is ignored.
- `GET /books/<id>` returns `{"book": {...}, "message": "Libro encontrado"}`.
- `PUT /books/<id>` returns `{"book": {...}, "message": "Libro actualizado correctamente"}`.
- `DELETE /books/<id>` returns an empty body.

### Request bodies

Object keys in request bodies are matched case-insensitively. Unknown keys and `null` values are ignored. Fields that are left out default to empty strings.

For `PUT`, the id comes from the URL, and all of the book's stored fields are overwritten with the body's values. A `PUT` to an id that matches no stored book still answers 200 and stores nothing.

### Errors

Errors are returned as plain-text messages:

| Situation                                   | Status | Message                     |
|---------------------------------------------|--------|-----------------------------|
| Body is not valid JSON or has bad types     | 400    | `Datos inválidos`           |
| Malformed id on `PUT`                       | 400    | `ID inválido`               |
| Listing fails                               | 500    | `Error al obtener libros`   |
| Creating fails                              | 500    | `Error al insertar libro`   |
| Lookup fails (absent book or malformed id)  | 404    | `Libro no encontrado`       |
| Updating fails                              | 500    | `Error al actualizar libro` |
| Deleting fails (absent book or malformed id) | 500   | `Error al eliminar libro`   |

## Use as a library

You can assemble the layers yourself, for example to use a different collection:

```python
from pymongo import MongoClient

from bookshelf_api.app import create_app
from bookshelf_api.controller import BookController
from bookshelf_api.repository import BookRepository
from bookshelf_api.service import BookService

collection = MongoClient("mongodb://localhost:27017")["library"]["books"]
controller = BookController(BookService(BookRepository(collection)))
app = create_app(controller)
app.run(port=8080)
```

The package is organised as follows:

- `bookshelf_api.models.Book` is a dataclass with fields `id`, `title`, `isbn` and `author`. It converts to and from JSON with `from_json` and `to_json`, and to and from MongoDB documents with `from_document` and `to_document`.
- `bookshelf_api.repository.BookRepository` wraps a collection and provides these methods: `get_all_books`, `create_book`, `get_book_by_id`, `update_book`, `remove_book_by_id` and `get_books_by_author`. `BookRepository.from_env()` connects using `MONGO_URI`. If the variable is unset or empty, it raises `RuntimeError`.
- `bookshelf_api.service.BookService` sits on top of a repository. Its methods `get_book_by_id` and `delete_book_by_id` raise `BookNotFoundError`, a subclass of `LookupError`, when the book does not exist.
- `bookshelf_api.controller.BookController` contains the Flask view functions. `bookshelf_api.app.create_app` registers them on a new `Flask` app.

## What it does not do

- There is no authentication, pagination or filtering.
- `get_books_by_author` is available only through the repository. No endpoint exposes it.
- The command runs Flask's development server. To run under a WSGI server, use `create_app` to build the application.
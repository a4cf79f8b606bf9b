import pytest
from bson import ObjectId

from bookshelf_api.models import Book

HEX_ID = "507f191e810c19729de860ea"


def test_from_json_reads_all_fields():
    book = Book.from_json(
        {"id": HEX_ID, "title": "Go Programming", "isbn": "1234567890", "author": "John Doe"}
    )
    assert book == Book(id=ObjectId(HEX_ID), title="Go Programming", isbn="1234567890", author="John Doe")


def test_json_round_trip():
    book = Book(id=ObjectId(), title="Book 1", isbn="1111111111", author="Author 1")
    assert Book.from_json(book.to_json()) == book


def test_to_json_key_order():
    book = Book(title="t", isbn="i", author="a")
    assert list(book.to_json()) == ["id", "title", "isbn", "author"]


def test_to_json_without_id_uses_nil_id():
    assert Book(title="t").to_json()["id"] == "000000000000000000000000"


def test_nil_id_in_json_decodes_as_unset():
    assert Book.from_json({"id": "000000000000000000000000"}).id is None


def test_empty_id_string_decodes_as_unset():
    assert Book.from_json({"id": "", "title": "x"}) == Book(title="x")


def test_from_json_matches_keys_case_insensitively():
    book = Book.from_json({"Title": "Upper", "AUTHOR": "Someone", "Isbn": "42"})
    assert (book.title, book.author, book.isbn) == ("Upper", "Someone", "42")


def test_from_json_accepts_extended_json_id():
    assert Book.from_json({"id": {"$oid": HEX_ID}}).id == ObjectId(HEX_ID)


def test_from_json_ignores_unknown_keys_and_nulls():
    book = Book.from_json({"title": "Kept", "publisher": "Other", "author": None})
    assert book == Book(title="Kept")


def test_from_json_null_document_gives_empty_book():
    assert Book.from_json(None) == Book()


@pytest.mark.parametrize("bad_id", ["invalid-id", HEX_ID[:-1], "zz" * 12, 17, {"other": HEX_ID}])
def test_from_json_rejects_bad_id(bad_id):
    with pytest.raises(ValueError):
        Book.from_json({"id": bad_id})


@pytest.mark.parametrize("data", ["invalid json", [1, 2], 5])
def test_from_json_rejects_non_objects(data):
    with pytest.raises(ValueError):
        Book.from_json(data)


def test_from_json_rejects_non_string_title():
    with pytest.raises(ValueError):
        Book.from_json({"title": 12})


def test_to_document_omits_unset_id():
    assert Book(title="t", isbn="i", author="a").to_document() == {
        "title": "t",
        "isbn": "i",
        "author": "a",
    }


def test_to_document_includes_id():
    object_id = ObjectId()
    assert Book(id=object_id, title="t").to_document()["_id"] == object_id


def test_document_round_trip():
    book = Book(id=ObjectId(), title="Book 2", isbn="2222222222", author="Author 2")
    assert Book.from_document(book.to_document()) == book


def test_from_document_fills_missing_fields_with_empty_strings():
    assert Book.from_document({"title": "Only"}) == Book(title="Only")


def test_from_document_rejects_wrong_types():
    with pytest.raises(ValueError):
        Book.from_document({"author": 3})
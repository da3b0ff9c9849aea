from __future__ import annotations

import pytest

from feedcanon.models.common import ParseMode
from feedcanon.services.namespaces.dublincore import retrieve_dublincore


def _dump(value):
    return value.model_dump(exclude_none=True)


def test_retrieve_dublincore_full_element_set():
    value = {
        "dc:title": {"#text": "Sample Title"},
        "dc:creator": {"#text": "John Doe"},
        "dc:subject": {"#text": "Test Subject"},
        "dc:description": {"#text": "This is a description"},
        "dc:publisher": {"#text": "Test Publisher"},
        "dc:contributor": {"#text": "Jane Smith"},
        "dc:date": {"#text": "2023-05-15T09:30:00Z"},
        "dc:type": {"#text": "Article"},
        "dc:format": {"#text": "text/html"},
        "dc:identifier": {"#text": "urn:uuid:1225c695-cfb8-4ebb-aaaa-80da344efa6a"},
        "dc:source": {"#text": "https://example.org/source"},
        "dc:language": {"#text": "en-US"},
        "dc:relation": {"#text": "https://example.org/related"},
        "dc:coverage": {"#text": "Worldwide"},
        "dc:rights": {"#text": "Copyright 2023, All rights reserved"},
    }

    result = retrieve_dublincore(value, ParseMode.COERCE)

    assert _dump(result) == {
        "title": "Sample Title",
        "creator": "John Doe",
        "subject": "Test Subject",
        "description": "This is a description",
        "publisher": "Test Publisher",
        "contributor": "Jane Smith",
        "date": "2023-05-15T09:30:00Z",
        "type": "Article",
        "format": "text/html",
        "identifier": "urn:uuid:1225c695-cfb8-4ebb-aaaa-80da344efa6a",
        "source": "https://example.org/source",
        "language": "en-US",
        "relation": "https://example.org/related",
        "coverage": "Worldwide",
        "rights": "Copyright 2023, All rights reserved",
    }


def test_retrieve_dublincore_partial():
    value = {
        "dc:title": {"#text": "Sample Title"},
        "dc:creator": {"#text": "John Doe"},
        "dc:date": {"#text": "2023-05-15T09:30:00Z"},
    }

    assert _dump(retrieve_dublincore(value, ParseMode.COERCE)) == {
        "title": "Sample Title",
        "creator": "John Doe",
        "date": "2023-05-15T09:30:00Z",
    }


def test_retrieve_dublincore_coerces_scalars_but_not_dates():
    value = {
        "dc:title": {"#text": 123},
        "dc:date": {"#text": True},
        "dc:identifier": {"#text": 456},
    }

    assert _dump(retrieve_dublincore(value, ParseMode.COERCE)) == {
        "title": "123",
        "identifier": "456",
    }


def test_retrieve_dublincore_strict_drops_non_strings():
    value = {
        "dc:title": {"#text": 123},
        "dc:creator": {"#text": "John Doe"},
    }

    assert _dump(retrieve_dublincore(value, ParseMode.STRICT)) == {"creator": "John Doe"}


def test_retrieve_dublincore_empty_object():
    assert retrieve_dublincore({}, ParseMode.COERCE) is None


@pytest.mark.parametrize("value", ["not an object", None, [], 42])
def test_retrieve_dublincore_non_object(value):
    assert retrieve_dublincore(value, ParseMode.COERCE) is None


def test_retrieve_dublincore_ignores_foreign_tags():
    value = {
        "other:property": {"#text": "value"},
        "unknown:field": {"#text": "data"},
    }

    assert retrieve_dublincore(value, ParseMode.COERCE) is None


def test_retrieve_dublincore_missing_text():
    value = {
        "dc:title": {},
        "dc:creator": {"#text": "John Doe"},
        "dc:date": {"#text": "2023-01-01T12:00:00Z"},
    }

    assert _dump(retrieve_dublincore(value, ParseMode.COERCE)) == {
        "creator": "John Doe",
        "date": "2023-01-01T12:00:00Z",
    }


def test_retrieve_dublincore_keeps_empty_strings():
    value = {
        "dc:title": {"#text": ""},
        "dc:creator": {"#text": "John Doe"},
        "dc:description": {"#text": ""},
    }

    assert _dump(retrieve_dublincore(value, ParseMode.COERCE)) == {
        "title": "",
        "creator": "John Doe",
        "description": "",
    }


def test_retrieve_dublincore_null_text_is_absent():
    value = {
        "dc:title": {"#text": None},
        "dc:creator": {"#text": "John Doe"},
        "dc:date": {"#text": None},
    }

    assert _dump(retrieve_dublincore(value, ParseMode.COERCE)) == {"creator": "John Doe"}


def test_retrieve_dublincore_all_null_values():
    value = {
        "dc:title": {"#text": None},
        "dc:creator": {"#text": None},
        "dc:subject": {"#text": None},
    }

    assert retrieve_dublincore(value, ParseMode.COERCE) is None

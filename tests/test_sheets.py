import asyncio
from unittest.mock import patch

import aiohttp
import pytest

from book_selector.errors import SheetsFetchError
from book_selector.services import sheets
from book_selector.services.sheets import (
    build_export_url,
    fetch_book_list,
    format_sheet_rows,
    parse_sheet_csv,
)


def test_format_sheet_rows():
    rows = [
        ["1", "Dune", "Frank Herbert"],
        ["2", "Dune: Messiah"],
        ["3"],
        ["", "No number"],
        ["4", "  "],
        [" 5 ", " Ubik "],
    ]
    assert format_sheet_rows(rows) == ["1: Dune", "2: Dune- Messiah", "5: Ubik"]


def test_parse_sheet_csv_drops_header():
    text = '"Number","Title","Suggested by"\n"1","Dune","Ann"\n"2","Time: A History","Bo"\n'
    assert parse_sheet_csv(text) == ["1: Dune", "2: Time- A History"]


def test_build_export_url_quotes_sheet_name():
    url = build_export_url("abc123", "Book Suggestions")
    assert url == (
        "https://docs.google.com/spreadsheets/d/abc123/gviz/tq"
        "?tqx=out:csv&sheet=Book%20Suggestions"
    )


def test_fetch_requires_sheet_id():
    with pytest.raises(SheetsFetchError):
        asyncio.run(fetch_book_list(""))


class FakeResponse:
    def __init__(self, status, text):
        self.status = status
        self._text = text

    async def text(self):
        return self._text

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        return False


class FakeSession:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.urls = []

    def get(self, url, **kwargs):
        self.urls.append(url)
        if self.error is not None:
            raise self.error
        return self.response

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        return False


def test_fetch_book_list():
    session = FakeSession(FakeResponse(200, "Number,Title\n1,Dune\n2,Ubik\n"))
    with patch.object(sheets.aiohttp, "ClientSession", return_value=session):
        lines = asyncio.run(fetch_book_list("abc123", "Suggestions"))

    assert lines == ["1: Dune", "2: Ubik"]
    assert session.urls == [build_export_url("abc123", "Suggestions")]


def test_fetch_book_list_empty_sheet():
    session = FakeSession(FakeResponse(200, "Number,Title\n"))
    with patch.object(sheets.aiohttp, "ClientSession", return_value=session):
        assert asyncio.run(fetch_book_list("abc123")) == []


def test_fetch_book_list_http_error():
    session = FakeSession(FakeResponse(404, "not found"))
    with patch.object(sheets.aiohttp, "ClientSession", return_value=session):
        with pytest.raises(SheetsFetchError, match="HTTP 404"):
            asyncio.run(fetch_book_list("abc123"))


def test_fetch_book_list_network_error():
    session = FakeSession(error=aiohttp.ClientConnectionError("boom"))
    with patch.object(sheets.aiohttp, "ClientSession", return_value=session):
        with pytest.raises(SheetsFetchError, match="Unable to retrieve"):
            asyncio.run(fetch_book_list("abc123"))

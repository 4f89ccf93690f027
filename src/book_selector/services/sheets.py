"""Google Sheets book list source.

Downloads the suggestions sheet as CSV and turns it into ``id: name``
lines for the book list file. Column A holds the book number and column B
the title.
"""
import csv
import io
import logging
from typing import Iterable, List, Sequence
from urllib.parse import quote

import aiohttp

from book_selector.errors import SheetsFetchError
from book_selector.services.catalog import SEPARATOR

logger = logging.getLogger(__name__)

# ── Constants ────────────────────────────────────────────────────────────

SHEETS_CSV_URL = (
    "https://docs.google.com/spreadsheets/d/{sheet_id}/gviz/tq?tqx=out:csv&sheet={sheet_name}"
)

# Timeout for HTTP requests (seconds)
_HTTP_TIMEOUT = 15

# Embedded colons would break the book list format
_COLON_REPLACEMENT = "-"


def build_export_url(sheet_id: str, sheet_name: str) -> str:
    """Return the CSV export URL for one tab of a spreadsheet."""
    return SHEETS_CSV_URL.format(
        sheet_id=quote(sheet_id, safe=""),
        sheet_name=quote(sheet_name, safe=""),
    )


def format_sheet_rows(rows: Iterable[Sequence[str]]) -> List[str]:
    """Convert sheet rows into book list lines.

    Rows without a number or a title are skipped.

    Examples:
        [["1", "Dune"]]                 -> ['1: Dune']
        [["2", "Dune: Messiah", "x"]]   -> ['2: Dune- Messiah']
    """
    lines = []
    for row in rows:
        if len(row) < 2:
            continue
        book_id = row[0].strip()
        title = row[1].strip().replace(SEPARATOR, _COLON_REPLACEMENT)
        if not book_id or not title:
            continue
        lines.append(f"{book_id}{SEPARATOR} {title}")
    return lines


def parse_sheet_csv(text: str) -> List[str]:
    """Parse a CSV export into book list lines, dropping the header row."""
    rows = list(csv.reader(io.StringIO(text)))
    return format_sheet_rows(rows[1:])


async def fetch_book_list(sheet_id: str, sheet_name: str = "Suggestions") -> List[str]:
    """Download the book list from a shared spreadsheet.

    Returns:
        Book list lines; empty if the sheet has no data

    Raises:
        SheetsFetchError: On any HTTP or network failure
    """
    if not sheet_id:
        raise SheetsFetchError("BOOK_SELECTOR_SHEET_ID is not set")

    url = build_export_url(sheet_id, sheet_name)
    try:
        async with aiohttp.ClientSession() as session:
            async with session.get(
                url,
                timeout=aiohttp.ClientTimeout(total=_HTTP_TIMEOUT),
            ) as response:
                if response.status != 200:
                    body_text = (await response.text())[:300]
                    logger.error("Sheets HTTP %d: %s", response.status, body_text)
                    raise SheetsFetchError(
                        f"Google Sheets returned HTTP {response.status}"
                    )
                text = await response.text()

    except SheetsFetchError:
        raise
    except Exception as exc:
        logger.error("Sheets request failed: %s", exc)
        raise SheetsFetchError("Unable to retrieve data from sheet") from exc

    lines = parse_sheet_csv(text)
    if not lines:
        logger.warning("No data found in sheet %s", sheet_name)
    else:
        logger.info("Fetched %d books from sheet %s", len(lines), sheet_name)
    return lines

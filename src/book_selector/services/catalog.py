"""Book catalog service.

Holds the mapping from the number a voter types on a ballot to the book
title, and reads it from the ``id: name`` book list format.
"""
import logging
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from book_selector.errors import (
    CatalogSourceUnreadableError,
    MalformedCatalogLineError,
)

logger = logging.getLogger(__name__)

SEPARATOR = ":"


def normalize_book_name(name: str) -> str:
    """Upper-case a title and trim surrounding whitespace.

    Example: normalize_book_name("  Dune ") -> 'DUNE'
    """
    return name.strip().upper()


def parse_catalog_line(line: str, line_number: int = 0) -> Tuple[int, str]:
    """Split a book list line into its number and normalized title.

    Examples:
        "1: Dune"           -> (1, 'DUNE')
        " 12 :Foundation "  -> (12, 'FOUNDATION')

    Raises:
        MalformedCatalogLineError: If the line has no colon, more than one,
            a non-integer number or an empty title.
    """
    parts = line.split(SEPARATOR)
    if len(parts) == 1:
        raise MalformedCatalogLineError(
            line_number, line, "There was no colon in this line of the file"
        )
    if len(parts) > 2:
        raise MalformedCatalogLineError(
            line_number, line, "This line in the book list contains more than one colon"
        )

    raw_id, raw_name = parts
    try:
        book_id = int(raw_id.strip())
    except ValueError:
        raise MalformedCatalogLineError(
            line_number, line, "Error parsing a book number from this line"
        ) from None

    name = normalize_book_name(raw_name)
    if not name:
        raise MalformedCatalogLineError(line_number, line, "The book name is empty")
    return book_id, name


class BookCatalog:
    """Mapping from book number to book title.

    Reloading merges into the existing entries; a number that appears again
    takes the newer title.
    """

    def __init__(self, books: Optional[Dict[int, str]] = None):
        self._books: Dict[int, str] = {}
        for book_id, name in (books or {}).items():
            self._books[int(book_id)] = normalize_book_name(name)

    def __len__(self) -> int:
        return len(self._books)

    def __contains__(self, book_id: object) -> bool:
        return book_id in self._books

    def __getitem__(self, book_id: int) -> str:
        return self._books[book_id]

    def __iter__(self) -> Iterator[int]:
        return iter(sorted(self._books))

    def __repr__(self) -> str:
        return f"BookCatalog({len(self._books)} books)"

    def get(self, book_id: int, default: Optional[str] = None) -> Optional[str]:
        return self._books.get(book_id, default)

    def items(self) -> List[Tuple[int, str]]:
        """Return ``(number, title)`` pairs ordered by number."""
        return sorted(self._books.items())

    def load(self, lines: Iterable[str]) -> List[MalformedCatalogLineError]:
        """Parse book list lines into the catalog.

        Malformed lines are logged and skipped so a partial list still
        loads. Blank lines are ignored.

        Args:
            lines: Lines in the ``id: name`` format

        Returns:
            The errors for every skipped line, in file order
        """
        if isinstance(lines, str):
            lines = lines.splitlines()
        errors: List[MalformedCatalogLineError] = []
        loaded = 0
        for line_number, raw_line in enumerate(lines, start=1):
            line = raw_line.rstrip("\r\n")
            if not line.strip():
                continue
            try:
                book_id, name = parse_catalog_line(line, line_number)
            except MalformedCatalogLineError as exc:
                logger.warning("Skipping book list %s", exc)
                errors.append(exc)
                continue

            previous = self._books.get(book_id)
            if previous is not None and previous != name:
                logger.info("Book %d renamed from '%s' to '%s'", book_id, previous, name)
            self._books[book_id] = name
            loaded += 1

        logger.info(
            "Loaded %d books (%d skipped), catalog now holds %d",
            loaded, len(errors), len(self._books),
        )
        return errors

    def load_file(self, path: str) -> List[MalformedCatalogLineError]:
        """Load the catalog from a book list file.

        Raises:
            CatalogSourceUnreadableError: If the file cannot be read
        """
        try:
            with open(path, encoding="utf-8") as source:
                lines = source.readlines()
        except (OSError, UnicodeDecodeError) as exc:
            logger.error("Unable to read book list %s: %s", path, exc)
            raise CatalogSourceUnreadableError(path, exc) from exc
        return self.load(lines)


def write_book_list(path: str, lines: Iterable[str]) -> int:
    """Write ``id: name`` lines to the book list file, replacing it.

    Returns:
        Number of lines written

    Raises:
        CatalogSourceUnreadableError: If the file cannot be written
    """
    count = 0
    try:
        with open(path, "w", encoding="utf-8") as target:
            for line in lines:
                target.write(f"{line}\n")
                count += 1
    except OSError as exc:
        logger.error("Unable to write book list %s: %s", path, exc)
        raise CatalogSourceUnreadableError(path, exc, action="writing books to") from exc
    logger.info("Wrote %d books to %s", count, path)
    return count

"""Exceptions raised by the book selector.

Everything derives from ``BookSelectorError`` so the menu shell can report
any failure to the user and keep looping.
"""
from typing import Optional


class BookSelectorError(Exception):
    """Base class for all book selector errors."""


# ── Ballots ──────────────────────────────────────────────────────────────


class BallotError(BookSelectorError):
    """A ballot was rejected. Nothing was added to the pool."""


class DuplicateVoterError(BallotError):
    """The voter has already cast a ballot in this session."""

    def __init__(self, voter: str):
        self.voter = voter
        super().__init__(
            f"{voter} HAS ALREADY VOTED! NO ADDITIONS WILL BE MADE"
        )


class InvalidVoterNameError(BallotError):
    """The voter name is empty once normalized."""

    def __init__(self, raw_name: str):
        self.raw_name = raw_name
        super().__init__("A voter name is required")


class InvalidRankFormatError(BallotError):
    """A ballot token is not an integer."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Could not read a book number out of {token!r}")


class RankOutOfRangeError(BallotError):
    """A ballot references a book number that is not in the catalog."""

    def __init__(self, rank: int, catalog_size: int, reason: Optional[str] = None):
        self.rank = rank
        self.catalog_size = catalog_size
        if reason is None:
            if rank < 1:
                reason = f"This number is less than or equal to zero: {rank}"
            else:
                reason = (
                    f"This number is greater than the read in number of books: {rank}"
                )
        message = reason
        if self.forgot_book_list:
            message += (
                "\n1 IS BIGGER THAN THE NUMBER OF BOOKS SO YOU PROBABLY FORGOT "
                "TO READ THE BOOK LIST INTO THE PROGRAM"
            )
        super().__init__(message)

    @property
    def forgot_book_list(self) -> bool:
        """True when rank 1 is out of range, i.e. the catalog is empty."""
        return self.rank == 1 and self.catalog_size < 1


class UndefinedRankWeightError(BallotError):
    """No weight is configured for a ballot position."""

    def __init__(self, position: int):
        self.position = position
        super().__init__(
            f"No vote weight is configured for vote number {position + 1}"
        )


class BallotTooLongError(BallotError):
    """A ballot holds more ranks than the configured number of votes."""

    def __init__(self, given: int, expected: int):
        self.given = given
        self.expected = expected
        super().__init__(
            f"There were {given} votes when we were expecting {expected}"
        )


# ── Pool ─────────────────────────────────────────────────────────────────


class EmptyPoolError(BookSelectorError):
    """A winner was requested before any votes were cast."""

    def __init__(self):
        super().__init__("No votes have been cast, there is nothing to select from")


# ── Catalog ──────────────────────────────────────────────────────────────


class CatalogError(BookSelectorError):
    """Base class for book list errors."""


class MalformedCatalogLineError(CatalogError):
    """A book list line could not be parsed. The line is skipped."""

    def __init__(self, line_number: int, line: str, reason: str):
        self.line_number = line_number
        self.line = line
        self.reason = reason
        super().__init__(f"line {line_number}: {reason}: {line!r}")


class CatalogSourceUnreadableError(CatalogError):
    """The book list location could not be opened."""

    def __init__(
        self,
        location: str,
        cause: Optional[BaseException] = None,
        action: str = "reading in books from",
    ):
        self.location = location
        detail = f" | {cause}" if cause else ""
        super().__init__(f"Error {action} this file: {location}{detail}")


# ── Remote book list ─────────────────────────────────────────────────────


class SheetsFetchError(BookSelectorError):
    """The remote book list could not be downloaded."""

"""Menu command handlers.

Each handler receives the selection session and the console, performs one
menu command and returns whether the vote summary and menu should be shown
again before the next prompt.
"""
import asyncio
import logging
from dataclasses import dataclass
from typing import Callable, Dict, Optional

from book_selector.config import Config
from book_selector.console import Console
from book_selector.errors import (
    BallotError,
    CatalogSourceUnreadableError,
    EmptyPoolError,
    InvalidVoterNameError,
    SheetsFetchError,
)
from book_selector.formatters import format_selection, format_vote_summary
from book_selector.log_handler import get_recent_logs
from book_selector.menu import (
    BOOKS_READ_TEXT,
    CMD_ADD_VOTES,
    CMD_READ_BOOKS,
    CMD_SELECT,
    CMD_SHOW_LOGS,
    CMD_WRITE_BOOKS,
    VOTER_NAME_PROMPT,
    get_ballot_prompt,
)
from book_selector.services.catalog import BookCatalog, write_book_list
from book_selector.services.sheets import fetch_book_list
from book_selector.services.voting_logic import VoteEngine, normalize_voter_name

logger = logging.getLogger(__name__)


@dataclass
class SelectorSession:
    """State of one book selection run."""

    config: Config
    catalog: BookCatalog
    engine: VoteEngine

    @classmethod
    def create(cls, config: Config) -> "SelectorSession":
        catalog = BookCatalog()
        return cls(config=config, catalog=catalog, engine=VoteEngine(catalog, config))

    def vote_summary(self) -> str:
        return format_vote_summary(self.engine.voters, self.engine.tally())


Handler = Callable[[SelectorSession, Console], bool]


def add_votes(session: SelectorSession, console: Console) -> bool:
    """Ask for one voter's name and ranked book numbers and record them."""
    name = console.ask(VOTER_NAME_PROMPT)
    if name is None:
        return True
    if not normalize_voter_name(name):
        console.write(f"\nError: {InvalidVoterNameError(name)}")
        return True
    if session.engine.has_voted(name):
        # Reject before asking for the ballot
        console.write("THIS VOTER ALREADY EXISTS! NO ADDITIONS WILL BE MADE")
        return True

    raw_ranks = console.ask(get_ballot_prompt(session.config))
    if raw_ranks is None:
        return True

    try:
        ballot = session.engine.cast_ballot(name, raw_ranks)
    except BallotError as exc:
        logger.info("Ballot rejected: %s", exc)
        console.write(f"\nError: {exc}")
        return True

    for warning in ballot.warnings:
        console.write(f"Error: {warning}")
    console.write(f"\nVotes recorded for {ballot.voter}.")
    return True


def read_books(session: SelectorSession, console: Console) -> bool:
    """Load the book list file into the catalog."""
    location = session.config.book_list_location
    try:
        errors = session.catalog.load_file(location)
    except CatalogSourceUnreadableError as exc:
        console.write(str(exc))
        return True

    for error in errors:
        console.write(f"ERROR: {error}")
    console.write(f"\n{BOOKS_READ_TEXT}")
    return True


def write_books(session: SelectorSession, console: Console) -> bool:
    """Replace the book list file with the contents of the spreadsheet."""
    config = session.config
    try:
        lines = asyncio.run(fetch_book_list(config.sheet_id, config.sheet_name))
    except SheetsFetchError as exc:
        console.write(f"Error fetching the book list: {exc}")
        return True

    if not lines:
        console.write("No data found.")
        return True

    try:
        count = write_book_list(config.book_list_location, lines)
    except CatalogSourceUnreadableError as exc:
        console.write(str(exc))
        return True
    console.write(f"\n{count} books written to {config.book_list_location}")
    return True


def select_book(session: SelectorSession, console: Console) -> bool:
    """Draw the winner and print the announcement."""
    try:
        index, winner = session.engine.draw()
    except EmptyPoolError as exc:
        console.write(f"Error: {exc}")
        return True

    console.write(format_selection(
        index, winner, session.engine.pool, session.vote_summary(),
    ))
    return False


def show_logs(session: SelectorSession, console: Console) -> bool:
    """Print the recent log lines kept in memory."""
    lines = get_recent_logs()
    if not lines:
        console.write("No log messages yet.")
    else:
        console.write("\n".join(lines))
    return True


HANDLERS: Dict[str, Handler] = {
    CMD_ADD_VOTES: add_votes,
    CMD_READ_BOOKS: read_books,
    CMD_WRITE_BOOKS: write_books,
    CMD_SELECT: select_book,
    CMD_SHOW_LOGS: show_logs,
}


def get_handler(command: str) -> Optional[Handler]:
    return HANDLERS.get(command)

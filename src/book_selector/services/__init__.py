"""Services package."""
from book_selector.services.catalog import (
    BookCatalog,
    normalize_book_name,
    parse_catalog_line,
    write_book_list,
)
from book_selector.services.voting_logic import (
    Ballot,
    TallyRow,
    VoteEngine,
    normalize_voter_name,
    parse_ranks,
)
from book_selector.services.sheets import fetch_book_list, format_sheet_rows

__all__ = [
    "BookCatalog", "normalize_book_name", "parse_catalog_line", "write_book_list",
    "Ballot", "TallyRow", "VoteEngine", "normalize_voter_name", "parse_ranks",
    "fetch_book_list", "format_sheet_rows",
]

"""Menu commands and prompt texts for the console."""
from book_selector.config import Config


# ── Commands ─────────────────────────────────────────────────────────────

CMD_ADD_VOTES = "A"
CMD_READ_BOOKS = "R"
CMD_WRITE_BOOKS = "W"
CMD_SELECT = "SELECT"
CMD_SHOW_LOGS = "L"
CMD_EXIT = "X"


# ── Texts ────────────────────────────────────────────────────────────────

WELCOME_TEXT = "Welcome to book selector!"
EXIT_TEXT = "Now exiting Book Selector!"
UNKNOWN_COMMAND_TEXT = (
    "That isn't an option that Book Selector understands. Please try again!"
)
BOOKS_READ_TEXT = "BOOKS HAVE BEEN READ IN"
VOTER_NAME_PROMPT = "What is the name of the voter?"


def normalize_command(text: str) -> str:
    """Upper-case and trim a typed command.

    Example: normalize_command(" select\\n") -> 'SELECT'
    """
    return text.strip().upper()


def get_main_menu_text() -> str:
    """Get the main menu listing."""
    return (
        "Select one of the following options:\n"
        "\n"
        "a/A: Add the selections of a voter.\n"
        "r/R: Read in the list of books.\n"
        "w/W: Update book list from Google Sheets.\n"
        "l/L: Show recent log messages.\n"
        "select: Select a book randomly based on the given votes and finish "
        "program (select must be typed completely)\n"
        "x: Exit Book Selector.\n"
        "\n"
        "What would you like do next?"
    )


def get_ballot_prompt(config: Config) -> str:
    """Prompt for a voter's book numbers, naming the configured weights."""
    return (
        f"Please enter {config.num_votes} votes separated by commas. "
        f"Your first three votes will receive a weighting of "
        f"{config.first_vote_weight}, {config.second_vote_weight}, and "
        f"{config.third_vote_weight} respectively."
    )

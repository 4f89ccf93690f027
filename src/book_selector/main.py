"""Main entry point for the book selector."""
import logging
import sys
from typing import Optional

from book_selector.config import Config
from book_selector.console import Console
from book_selector.handlers import SelectorSession, get_handler
from book_selector.log_handler import install_log_buffer
from book_selector.menu import (
    CMD_EXIT,
    EXIT_TEXT,
    UNKNOWN_COMMAND_TEXT,
    WELCOME_TEXT,
    get_main_menu_text,
    normalize_command,
)

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Send log records to stderr and keep recent ones for the menu."""
    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(level)
    logging.basicConfig(
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[stderr_handler],
    )
    # Root passes INFO through for the buffer, and lower when asked for
    logging.getLogger().setLevel(min(logging.INFO, logging.getLevelName(level)))
    install_log_buffer()


def run_menu(session: SelectorSession, console: Console) -> None:
    """Read and dispatch commands until ``X`` or end of input."""
    console.clear()
    console.write(f"\n{WELCOME_TEXT}")

    display = True
    while True:
        if display:
            summary = session.vote_summary()
            if summary:
                console.write(f"\n{summary}")
            console.write(f"\n{get_main_menu_text()}")

        line = console.read_line()
        if line is None:
            logger.info("End of input, leaving the menu")
            break
        command = normalize_command(line)
        console.clear()

        if command == CMD_EXIT:
            console.write(f"\n\n{EXIT_TEXT}\n")
            break

        handler = get_handler(command)
        if handler is None:
            console.write(UNKNOWN_COMMAND_TEXT)
            display = True
            continue

        logger.debug("Running command %s", command)
        display = handler(session, console)


def main(config: Optional[Config] = None, console: Optional[Console] = None) -> int:
    """Main function to start the book selector."""
    try:
        config = config or Config()
        config.validate()
    except ValueError as e:
        logging.basicConfig(level=logging.ERROR, stream=sys.stderr)
        logger.error("Configuration error: %s", e)
        return 1

    configure_logging(config.log_level)
    logger.info("Configuration validated successfully")

    session = SelectorSession.create(config)
    console = console or Console(clear_screen=config.clear_screen)
    try:
        run_menu(session, console)
    except KeyboardInterrupt:
        logger.info("Book selector stopped by user")
    return 0


if __name__ == "__main__":
    sys.exit(main())

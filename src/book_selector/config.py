"""Configuration module for the book selector."""
import logging
import os
from typing import List, Optional

from dotenv import load_dotenv

from book_selector.errors import UndefinedRankWeightError

load_dotenv()

_PREFIX = "BOOK_SELECTOR_"

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _env(name: str, default: Optional[str] = None) -> Optional[str]:
    value = os.getenv(_PREFIX + name)
    if value is None or not value.strip():
        return default
    return value.strip()


def _env_int(name: str, default: Optional[int]) -> Optional[int]:
    raw = _env(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{_PREFIX}{name} must be an integer, got {raw!r}") from exc


def _env_bool(name: str, default: bool) -> bool:
    raw = _env(name)
    if raw is None:
        return default
    return raw.lower() in _TRUE_VALUES


class Config:
    """Book selector configuration.

    Values come from keyword arguments first, then from ``BOOK_SELECTOR_*``
    environment variables (a ``.env`` file is honoured), then defaults.
    """

    def __init__(
        self,
        num_votes: Optional[int] = None,
        first_vote_weight: Optional[int] = None,
        second_vote_weight: Optional[int] = None,
        third_vote_weight: Optional[int] = None,
        book_list_location: Optional[str] = None,
        strict_ballot_length: Optional[bool] = None,
        random_seed: Optional[int] = None,
        sheet_id: Optional[str] = None,
        sheet_name: Optional[str] = None,
        clear_screen: Optional[bool] = None,
        log_level: Optional[str] = None,
    ):
        # Voting settings
        self.num_votes: int = (
            num_votes if num_votes is not None else _env_int("NUM_VOTES", 3)
        )
        self.first_vote_weight: int = (
            first_vote_weight if first_vote_weight is not None
            else _env_int("FIRST_VOTE_WEIGHT", 3)
        )
        self.second_vote_weight: int = (
            second_vote_weight if second_vote_weight is not None
            else _env_int("SECOND_VOTE_WEIGHT", 2)
        )
        self.third_vote_weight: int = (
            third_vote_weight if third_vote_weight is not None
            else _env_int("THIRD_VOTE_WEIGHT", 1)
        )
        self.strict_ballot_length: bool = (
            strict_ballot_length if strict_ballot_length is not None
            else _env_bool("STRICT_BALLOT_LENGTH", False)
        )
        self.random_seed: Optional[int] = (
            random_seed if random_seed is not None else _env_int("RANDOM_SEED", None)
        )

        # Book list settings
        self.book_list_location: str = (
            book_list_location or _env("BOOK_LIST_LOCATION", "conf/book-list.txt")
        )
        self.sheet_id: Optional[str] = sheet_id or _env("SHEET_ID")
        self.sheet_name: str = sheet_name or _env("SHEET_NAME", "Suggestions")

        # Display settings
        self.clear_screen: bool = (
            clear_screen if clear_screen is not None
            else _env_bool("CLEAR_SCREEN", True)
        )
        self.log_level: str = (log_level or _env("LOG_LEVEL", "WARNING")).upper()

    @property
    def vote_weights(self) -> List[int]:
        """Weights for the first, second and third ranked choice."""
        return [self.first_vote_weight, self.second_vote_weight, self.third_vote_weight]

    def weight_for_rank(self, position: int) -> int:
        """Return the weight of the ballot entry at 0-based *position*.

        Raises:
            UndefinedRankWeightError: If no weight is configured for it.
        """
        weights = self.vote_weights
        if position < 0 or position >= len(weights):
            raise UndefinedRankWeightError(position)
        return weights[position]

    # Validation
    def validate(self) -> None:
        """Validate configuration."""
        if self.num_votes < 1:
            raise ValueError("BOOK_SELECTOR_NUM_VOTES must be at least 1")
        for name, weight in zip(
            ("FIRST", "SECOND", "THIRD"), self.vote_weights
        ):
            if weight < 0:
                raise ValueError(f"BOOK_SELECTOR_{name}_VOTE_WEIGHT must not be negative")
        if not self.book_list_location:
            raise ValueError("BOOK_SELECTOR_BOOK_LIST_LOCATION is not set")
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"Unknown BOOK_SELECTOR_LOG_LEVEL: {self.log_level}")

"""Voting logic service.

Turns ranked ballots into a weighted pool of book titles and draws the
winner from it. A book ranked first by a voter goes into the pool
``first_vote_weight`` times, second ``second_vote_weight`` times and so on,
so a uniform draw over the pool favours each voter's top choices.
"""
import logging
import random
import time
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from book_selector.config import Config
from book_selector.errors import (
    BallotTooLongError,
    DuplicateVoterError,
    EmptyPoolError,
    InvalidRankFormatError,
    InvalidVoterNameError,
    RankOutOfRangeError,
)
from book_selector.services.catalog import BookCatalog

logger = logging.getLogger(__name__)

VOTER_NAME_STRIP = " .!\t\r\n"
RANK_TOKEN_STRIP = " !\t\r\n"


@dataclass
class Ballot:
    """An accepted ballot."""

    voter: str
    ranks: List[int]
    books: List[str]
    weights: List[int]
    warnings: List[str] = field(default_factory=list)

    @property
    def entries_added(self) -> int:
        return sum(self.weights)


@dataclass(frozen=True)
class TallyRow:
    """Running total for one book in the pool."""

    book_name: str
    count: int
    total: int

    @property
    def probability(self) -> float:
        """Chance of this book being drawn, in percent."""
        if not self.total:
            return 0.0
        return 100.0 * self.count / self.total


def normalize_voter_name(name: str) -> str:
    """Upper-case a voter name, trimming whitespace and ``.``/``!``.

    Example: normalize_voter_name(" alice! ") -> 'ALICE'
    """
    return name.strip(VOTER_NAME_STRIP).upper()


def parse_ranks(raw_ranks: str) -> List[int]:
    """Parse a comma separated ballot such as ``"3, 1, 2"``.

    Raises:
        InvalidRankFormatError: On the first token that is not an integer.
            Nothing after it is parsed.
    """
    ranks = []
    for token in raw_ranks.split(","):
        cleaned = token.strip(RANK_TOKEN_STRIP)
        try:
            ranks.append(int(cleaned))
        except ValueError:
            raise InvalidRankFormatError(token.strip()) from None
    return ranks


class VoteEngine:
    """Collects ballots for one selection session.

    Args:
        catalog: Book numbers voters may choose from
        config: Number of votes and per-rank weights
        rng: Random source for the draw. Defaults to one seeded from
            ``config.random_seed`` or the current time.
    """

    def __init__(
        self,
        catalog: BookCatalog,
        config: Config,
        rng: Optional[random.Random] = None,
    ):
        self.catalog = catalog
        self.config = config
        if rng is None:
            seed = config.random_seed if config.random_seed is not None else time.time_ns()
            rng = random.Random(seed)
        self._rng = rng
        self._pool: List[str] = []
        self._ballots: Dict[str, Ballot] = {}

    # ── Read-only views ──────────────────────────────────────────────────

    @property
    def pool(self) -> Tuple[str, ...]:
        return tuple(self._pool)

    @property
    def voters(self) -> List[str]:
        """Voters in the order their ballots were accepted."""
        return list(self._ballots)

    @property
    def has_votes(self) -> bool:
        return bool(self._pool)

    def has_voted(self, voter_name: str) -> bool:
        return normalize_voter_name(voter_name) in self._ballots

    # ── Ballots ──────────────────────────────────────────────────────────

    def _check_rank(self, rank: int) -> str:
        """Return the title for *rank* or raise if the catalog lacks it."""
        size = len(self.catalog)
        if rank < 1 or rank > size:
            raise RankOutOfRangeError(rank, size)
        name = self.catalog.get(rank)
        if name is None:
            raise RankOutOfRangeError(
                rank, size, reason=f"There is no book numbered {rank} in the book list"
            )
        return name

    def cast_ballot(self, voter_name: str, raw_ranks: str) -> Ballot:
        """Validate a ballot and add its weighted entries to the pool.

        The ballot is either applied completely or not at all.

        Args:
            voter_name: Name as typed; normalized before the duplicate check
            raw_ranks: Comma separated book numbers, best first

        Returns:
            The accepted ballot, including any non-fatal warnings

        Raises:
            BallotError: Any subclass; the pool and voter list are unchanged
        """
        voter = normalize_voter_name(voter_name)
        if not voter:
            raise InvalidVoterNameError(voter_name)
        if voter in self._ballots:
            logger.warning("Rejected duplicate ballot from %s", voter)
            raise DuplicateVoterError(voter)

        ranks = parse_ranks(raw_ranks)

        warnings = []
        if len(ranks) > self.config.num_votes:
            if self.config.strict_ballot_length:
                raise BallotTooLongError(len(ranks), self.config.num_votes)
            message = str(BallotTooLongError(len(ranks), self.config.num_votes))
            logger.warning("Ballot from %s: %s", voter, message)
            warnings.append(message)

        books = [self._check_rank(rank) for rank in ranks]
        weights = [self.config.weight_for_rank(position) for position in range(len(ranks))]

        # Validation is done; from here on nothing can fail.
        for book, weight in zip(books, weights):
            self._pool.extend([book] * weight)

        ballot = Ballot(
            voter=voter, ranks=ranks, books=books, weights=weights, warnings=warnings,
        )
        self._ballots[voter] = ballot
        logger.info(
            "Accepted ballot from %s: %s (%d pool entries added, pool size %d)",
            voter, ranks, ballot.entries_added, len(self._pool),
        )
        return ballot

    # ── Results ──────────────────────────────────────────────────────────

    def tally(self) -> List[TallyRow]:
        """Count pool entries per book.

        Rows come in the order each book first entered the pool.
        """
        total = len(self._pool)
        counts = Counter(self._pool)
        return [TallyRow(book_name=name, count=count, total=total)
                for name, count in counts.items()]

    def draw(self) -> Tuple[int, str]:
        """Draw a uniformly random pool entry.

        Returns:
            Tuple of (index into the pool, book title)

        Raises:
            EmptyPoolError: If no ballot has added anything to the pool
        """
        if not self._pool:
            raise EmptyPoolError()
        index = self._rng.randrange(len(self._pool))
        winner = self._pool[index]
        logger.info("Drew pool entry %d of %d: %s", index, len(self._pool), winner)
        return index, winner

    def draw_winner(self) -> str:
        """Draw the winning book title. See ``draw``."""
        return self.draw()[1]

"""Text formatting helpers for the console screens.

Everything here returns strings; printing is left to the caller.
"""
from typing import List, Sequence

from book_selector.services.voting_logic import TallyRow

SEPARATOR_LINE = "~" * 15


def format_probability(probability: float) -> str:
    """Format a percentage with three significant digits.

    Examples: 60.0 -> '60', 33.333 -> '33.3', 100.0 -> '100'
    """
    return f"{probability:.3g}"


def format_tally(rows: Sequence[TallyRow]) -> str:
    """Render tally rows as aligned columns.

    The title column is left-aligned, the vote count and chance columns
    are right-aligned, each to its widest entry.
    """
    if not rows:
        return ""

    names = [row.book_name for row in rows]
    counts = [f" {row.count} out of {row.total} votes," for row in rows]
    chances = [
        f" {format_probability(row.probability)} chance of being selected"
        for row in rows
    ]
    name_width = max(len(name) for name in names)
    count_width = max(len(count) for count in counts)
    chance_width = max(len(chance) for chance in chances)

    return "\n".join(
        f"{name.ljust(name_width)}:{count.rjust(count_width)}{chance.rjust(chance_width)}"
        for name, count, chance in zip(names, counts, chances)
    )


def format_vote_summary(voters: Sequence[str], rows: Sequence[TallyRow]) -> str:
    """Render who has voted and the running totals.

    Returns an empty string until something is in the pool.
    """
    if not rows:
        return ""
    lines = [f"So far {len(voters)} people have voted, they are:"]
    lines.extend(voters)
    lines.append("")
    lines.append("VOTE TOTALS AND PERCENTAGES:")
    lines.append(format_tally(rows))
    return "\n".join(lines)


def format_pool(pool: Sequence[str]) -> str:
    """Number every pool entry, starting at 0 like the draw does.

    Example: format_pool(["DUNE"]) -> '0.) DUNE'
    """
    return "\n".join(f"{index}.) {book}" for index, book in enumerate(pool))


def _separator_block() -> str:
    return "\n".join([SEPARATOR_LINE, SEPARATOR_LINE])


def format_selection(index: int, book_name: str, pool: Sequence[str], summary: str) -> str:
    """Build the announcement shown when the winner is drawn."""
    parts: List[str] = [
        _separator_block(),
        format_pool(pool),
        _separator_block(),
        "SELECTION TIME!",
        _separator_block(),
    ]
    if summary:
        parts.append(summary)
        parts.append(_separator_block())
    parts.append(f"THE MAGIC NUMBER IS: {index}")
    parts.append(f"WE WILL BE READING:\n\n{book_name}")
    return "\n\n".join(parts) + "\n"

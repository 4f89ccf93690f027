import os
import random

import pytest

from book_selector.config import Config
from book_selector.services.catalog import BookCatalog
from book_selector.services.voting_logic import VoteEngine


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    # Keep a developer's .env or shell settings out of the tests
    for name in list(os.environ):
        if name.startswith("BOOK_SELECTOR_"):
            monkeypatch.delenv(name, raising=False)


def make_config(**overrides):
    values = {
        "num_votes": 3,
        "first_vote_weight": 3,
        "second_vote_weight": 2,
        "third_vote_weight": 1,
        "book_list_location": "book-list.txt",
        "strict_ballot_length": False,
        "clear_screen": False,
        "log_level": "WARNING",
    }
    values.update(overrides)
    return Config(**values)


@pytest.fixture
def config():
    return make_config()


@pytest.fixture
def catalog():
    return BookCatalog({1: "Dune", 2: "Foundation", 3: "Hyperion", 4: "Solaris"})


@pytest.fixture
def engine(catalog, config):
    return VoteEngine(catalog, config, rng=random.Random(1234))


@pytest.fixture
def book_list_file(tmp_path):
    path = tmp_path / "book-list.txt"
    path.write_text(
        "1: Dune\n"
        "2: Foundation\n"
        "3: Hyperion\n",
        encoding="utf-8",
    )
    return path

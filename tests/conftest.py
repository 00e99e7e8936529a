"""Shared pytest fixtures for card and deck tests."""

import pytest

from cards.deck import Deck
from config.settings import Config, save_config


@pytest.fixture
def seed():
    """Provide a reproducible shuffle seed."""
    return 42


@pytest.fixture
def standard_deck(seed):
    """Unshuffled 52-card deck."""
    return Deck.standard(seed=seed)


@pytest.fixture
def full_deck(seed):
    """Unshuffled 54-card deck with jokers."""
    return Deck.full(seed=seed)


@pytest.fixture
def empty_deck():
    return Deck()


@pytest.fixture
def config_file(tmp_path):
    """Write a config with a fixed seed and small analysis run."""
    config = Config()
    config.deck.seed = 7
    config.analysis.trials = 2000
    config.analysis.seed = 7
    config.analysis.tolerance = 1.0
    config.analysis.show_progress = False
    path = tmp_path / "config.yaml"
    save_config(config, path)
    return path

"""Shared test fixtures."""

import pytest

from lexicon.lexicon import Lexicon
from morphology.segmenter import MorphemeSegmenter


@pytest.fixture(scope="session")
def bundled_lexicon():
    return Lexicon.from_file()


@pytest.fixture
def segmenter():
    """Segmenter over the bundled pattern tables."""
    return MorphemeSegmenter()


@pytest.fixture
def bare_segmenter():
    """Segmenter with no tables at all: everything goes through chunking."""
    return MorphemeSegmenter(prefixes=[], suffixes=[], roots=[])

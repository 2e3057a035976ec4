"""Build a toy morpheme embedding table from dictionary definitions.

Each input word is looked up in the bundled lexicon, segmented into
prefix / root / suffix morphemes, and its definition is reduced to a
5-dimensional feature vector.  That vector is folded into a running mean
for every morpheme the word produced, giving one averaged vector per
distinct morpheme.

Usage:
    from morpho_embed import embed

    run = embed(["kerfuffle", "defenestration"])
    for kind, text, vector in run.rows():
        print(kind.label, text, vector)

The command-line front end lives in gloss.py.
"""

import logging
from dataclasses import dataclass, field
from typing import ClassVar, Optional

from lexicon.lexicon import Lexicon
from morphology.segmenter import MorphemeSegmenter
from semantics.accumulator import EmbeddingTable
from semantics.features import FeatureExtractor

logger = logging.getLogger(__name__)

# ── Per-word outcomes ───────────────────────────────────────────────────────


@dataclass(frozen=True)
class Unmatched:
    status: ClassVar[str] = "unmatched"
    word: str


@dataclass(frozen=True)
class Unsegmentable:
    status: ClassVar[str] = "unsegmentable"
    word: str


@dataclass(frozen=True)
class Matched:
    status: ClassVar[str] = "matched"
    word: str
    morphemes: tuple
    definition: str
    features: tuple = ()


@dataclass
class EmbeddingRun:
    """Everything one pass over a word list produced."""

    outcomes: list = field(default_factory=list)
    table: EmbeddingTable = field(default_factory=EmbeddingTable)
    matched_count: int = 0
    dimensions: Optional[int] = None

    def rows(self):
        """``(kind, text, mean_vector)`` tuples in morpheme-key order."""
        return [(key.kind, key.text, vector) for key, vector in self.table.items()]


# ── Core logic ───────────────────────────────────────────────────────────────


class MorphemeEmbedder:
    """Fold words into a morpheme embedding table.

    Collaborators default to the bundled tables and lexicon.
    """

    def __init__(self, lexicon=None, segmenter=None, extractor=None):
        self.lexicon = lexicon if lexicon is not None else Lexicon.from_file()
        self.segmenter = segmenter if segmenter is not None else MorphemeSegmenter()
        self.extractor = extractor if extractor is not None else FeatureExtractor()

    def process_word(self, word, table):
        """Classify one word and, if it matched, add its vector to *table*."""
        definition = self.lexicon.lookup(word)
        if definition is None:
            logger.debug("%s: unmatched", word)
            return Unmatched(word)

        morphemes = self.segmenter.segment(word)
        if not morphemes:
            logger.debug("%s: no morphemes", word)
            return Unsegmentable(word)

        vector = self.extractor.extract(definition)
        for morpheme in morphemes:
            table.add(morpheme.key, vector)
        logger.debug("%s: %d morphemes", word, len(morphemes))
        return Matched(word, tuple(morphemes), definition, tuple(vector))

    def run(self, words):
        """Process *words* in order and return an ``EmbeddingRun``.

        Words are trimmed and lowercased; blank ones are skipped.  Duplicates
        are processed (and counted) every time they appear.
        """
        result = EmbeddingRun()
        for raw in words:
            word = raw.strip().lower()
            if not word:
                continue
            outcome = self.process_word(word, result.table)
            result.outcomes.append(outcome)
            if isinstance(outcome, Unmatched):
                continue
            result.matched_count += 1
            if isinstance(outcome, Matched) and result.dimensions is None:
                result.dimensions = len(outcome.features)
        return result


def embed(words, lexicon=None):
    """Convenience wrapper: run the default pipeline over *words*."""
    return MorphemeEmbedder(lexicon=lexicon).run(words)

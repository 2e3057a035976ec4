"""Turn a free-text definition into a fixed 5-dimensional feature vector.

Dimensions, in order:

    0  word_count        number of tokens
    1  avg_word_length   mean token length in characters
    2  sensory_ratio     share of tokens found in the sensory keyword set
    3  abstract_ratio    share of tokens found in the abstract keyword set
    4  lexical_density   distinct-token share + long-token share (may exceed 1)

Tokens are maximal runs of ASCII letters, lowercased.  A definition with
no tokens maps to the zero vector.
"""

import logging
import re
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)

FEATURE_DIMENSIONS = 5
FEATURE_NAMES = (
    "word_count",
    "avg_word_length",
    "sensory_ratio",
    "abstract_ratio",
    "lexical_density",
)

# Tokens at least this long count as "long" (a crude multi-syllable proxy).
LONG_WORD_LENGTH = 7

_NON_ASCII_LETTER = re.compile(r"[^A-Za-z]+")

# ── Load keyword sets from YAML ─────────────────────────────────────────────

_KEYWORDS_PATH = Path(__file__).with_name("keywords.yaml")


def load_keywords(path=_KEYWORDS_PATH):
    """Load the sensory and abstract keyword sets.

    Returns a ``(sensory, abstract)`` pair of frozensets.  A missing file
    yields two empty sets; every ratio that depends on them is then 0.
    """
    path = Path(path)
    if not path.exists():
        logger.warning("Keyword table not found at %s", path)
        return frozenset(), frozenset()
    with open(path, encoding="utf-8") as f:
        try:
            raw = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"{path}: invalid YAML") from exc
    if not isinstance(raw, dict):
        raise ValueError(f"{path}: expected a mapping with 'sensory' and 'abstract'")

    sets = []
    for name in ("sensory", "abstract"):
        entries = raw.get(name) or []
        if not isinstance(entries, list):
            raise ValueError(f"{path}: '{name}' must be a list of strings")
        sets.append(frozenset(
            str(e).strip().lower() for e in entries if e is not None and str(e).strip()
        ))
    logger.info(
        "Loaded %d sensory and %d abstract keywords from %s",
        len(sets[0]), len(sets[1]), path,
    )
    return sets[0], sets[1]


SENSORY_KEYWORDS, ABSTRACT_KEYWORDS = load_keywords()

# ── Core logic ───────────────────────────────────────────────────────────────


def tokenize(text):
    """Split on anything that is not an ASCII letter; lowercase; drop empties."""
    return [token.lower() for token in _NON_ASCII_LETTER.split(text) if token]


class FeatureExtractor:
    """Map definition strings to 5-dimensional feature vectors."""

    def __init__(self, sensory=None, abstract=None):
        self.sensory = frozenset(SENSORY_KEYWORDS if sensory is None else sensory)
        self.abstract = frozenset(ABSTRACT_KEYWORDS if abstract is None else abstract)

    def extract(self, definition):
        tokens = tokenize(definition)
        if not tokens:
            return [0.0] * FEATURE_DIMENSIONS

        word_count = float(len(tokens))
        total_chars = sum(len(token) for token in tokens)
        sensory_hits = sum(1 for token in tokens if token in self.sensory)
        abstract_hits = sum(1 for token in tokens if token in self.abstract)
        unique_tokens = len(set(tokens))
        long_tokens = sum(1 for token in tokens if len(token) >= LONG_WORD_LENGTH)

        return [
            word_count,
            total_chars / word_count,
            sensory_hits / word_count,
            abstract_hits / word_count,
            unique_tokens / word_count + long_tokens / word_count,
        ]

    __call__ = extract

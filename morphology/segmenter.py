"""Greedy prefix / root / suffix segmentation against literal pattern tables.

Segmentation is first-match-wins over ordered tables (see patterns.yaml),
applied in three passes:

    1. strip prefixes from the left, repeatedly
    2. strip suffixes from the right of what is left, repeatedly
    3. carve the remaining core into root segments

Neither affix pass may consume the whole remaining string, so a root
always survives.  Suffixes are emitted innermost first, i.e. in the reverse
of the order they were stripped.

Usage:
    from morphology.segmenter import MorphemeSegmenter

    segmenter = MorphemeSegmenter()
    segmenter.segment("defenestration")
    # [prefix(de), root(fenestr), suffix(ation)]
"""

import logging
import re
from pathlib import Path

import yaml

from morphology.morpheme import Morpheme, MorphemeKind

logger = logging.getLogger(__name__)

# Width of the chunks cut from root material no pattern covers.
FALLBACK_CHUNK_SIZE = 4

_NON_ASCII_LETTER = re.compile(r"[^A-Za-z]+")

# ── Load pattern tables from YAML ───────────────────────────────────────────

_PATTERNS_PATH = Path(__file__).with_name("patterns.yaml")


def _read_table(raw, name, path):
    entries = raw.get(name)
    if entries is None:
        return []
    if not isinstance(entries, list):
        raise ValueError(f"{path}: '{name}' must be a list of strings")
    return ["" if entry is None else str(entry).strip().lower() for entry in entries]


def load_patterns(path=_PATTERNS_PATH):
    """Read the prefix, suffix and root-pattern tables from a YAML file.

    Returns a ``(prefixes, suffixes, roots)`` tuple of lists with table
    order preserved.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Pattern table not found at {path}")
    with open(path, encoding="utf-8") as f:
        try:
            raw = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"{path}: invalid YAML") from exc
    if not isinstance(raw, dict):
        raise ValueError(f"{path}: expected a mapping of pattern tables")

    prefixes = _read_table(raw, "prefixes", path)
    suffixes = _read_table(raw, "suffixes", path)
    roots = _read_table(raw, "roots", path)
    logger.info(
        "Loaded %d prefixes, %d suffixes, %d root patterns from %s",
        len(prefixes), len(suffixes), len(roots), path,
    )
    return prefixes, suffixes, roots


PREFIXES, SUFFIXES, ROOT_PATTERNS = load_patterns()

# ── Core logic ───────────────────────────────────────────────────────────────


def clean_word(word):
    """Drop every non-ASCII-letter character and lowercase the rest."""
    return _NON_ASCII_LETTER.sub("", word).lower()


def _first_prefix(table, text):
    for candidate in table:
        if candidate and text.startswith(candidate):
            return candidate
    return None


def _first_suffix(table, text):
    for candidate in table:
        if candidate and text.endswith(candidate):
            return candidate
    return None


class MorphemeSegmenter:
    """Split words into tagged morphemes using ordered pattern tables.

    Tables default to the bundled ones from patterns.yaml; pass smaller
    tables to pin behaviour in tests.
    """

    def __init__(self, prefixes=None, suffixes=None, roots=None,
                 chunk_size=FALLBACK_CHUNK_SIZE):
        if chunk_size < 1:
            raise ValueError("chunk_size must be at least 1")
        self.prefixes = list(PREFIXES if prefixes is None else prefixes)
        self.suffixes = list(SUFFIXES if suffixes is None else suffixes)
        self.roots = list(ROOT_PATTERNS if roots is None else roots)
        self.chunk_size = chunk_size

    def strip_prefixes(self, word):
        """Return ``(prefixes, remainder)`` after greedy left-to-right stripping."""
        matches = []
        working = word
        while True:
            prefix = _first_prefix(self.prefixes, working)
            # The first match decides: if it would eat everything, stop
            # rather than trying a shorter entry further down the table.
            if prefix is None or len(prefix) >= len(working):
                break
            matches.append(prefix)
            working = working[len(prefix):]
        return matches, working

    def strip_suffixes(self, core):
        """Return ``(suffixes, remainder)``; suffixes are outermost first."""
        matches = []
        while True:
            suffix = _first_suffix(self.suffixes, core)
            if suffix is None or len(suffix) >= len(core):
                break
            matches.append(suffix)
            core = core[:-len(suffix)]
        return matches, core

    def decompose_root(self, core):
        """Carve *core* into root segments.

        Known root patterns are taken first-match-wins from the front.  When
        none applies, material longer than the chunk size is cut into
        fixed-width chunks and the final short tail becomes one root.
        """
        roots = []
        remainder = core
        while remainder:
            pattern = _first_prefix(self.roots, remainder)
            if pattern is not None:
                roots.append(pattern)
                remainder = remainder[len(pattern):]
                continue
            if len(remainder) <= self.chunk_size:
                roots.append(remainder)
                break
            roots.append(remainder[:self.chunk_size])
            remainder = remainder[self.chunk_size:]
        return roots

    def segment(self, word):
        """Segment *word* into prefixes, roots, then suffixes (innermost first).

        Returns an empty list only when the cleaned word is empty.
        """
        cleaned = clean_word(word)
        if not cleaned:
            return []

        prefixes, working = self.strip_prefixes(cleaned)
        suffixes, core = self.strip_suffixes(working)

        roots = self.decompose_root(core)
        if not roots:
            # Nothing left between the affixes: keep the whole word as root.
            roots = [cleaned]

        morphemes = [Morpheme(MorphemeKind.PREFIX, p) for p in prefixes]
        morphemes.extend(Morpheme(MorphemeKind.ROOT, r) for r in roots)
        morphemes.extend(Morpheme(MorphemeKind.SUFFIX, s) for s in reversed(suffixes))
        return morphemes

"""Word -> definition lookup over a small YAML lexicon, plus word-list input.

The bundled lexicon lives in definitions.yaml next to this module.  Word
lists are plain text, one token per line, with ``#`` starting a comment.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)

_DEFINITIONS_PATH = Path(__file__).with_name("definitions.yaml")


@dataclass(frozen=True)
class LexiconEntry:
    word: str
    definition: str
    source: str = ""


class Lexicon:
    """Read-only mapping from lowercase headword to ``LexiconEntry``."""

    def __init__(self, entries=()):
        self.entries = {}
        for entry in entries:
            if isinstance(entry, tuple):
                entry = LexiconEntry(*entry)
            word = entry.word.strip().lower()
            if word in self.entries:
                raise ValueError(f"Duplicate lexicon entry: {word!r}")
            self.entries[word] = LexiconEntry(word, entry.definition, entry.source)

    @classmethod
    def from_file(cls, path=_DEFINITIONS_PATH):
        """Load a lexicon from YAML.

        Each headword maps either to a mapping with ``definition`` (and an
        optional ``source``) or directly to the definition string.
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Lexicon not found at {path}")
        with open(path, encoding="utf-8") as f:
            try:
                raw = yaml.safe_load(f) or {}
            except yaml.YAMLError as exc:
                raise ValueError(f"{path}: invalid YAML") from exc
        if not isinstance(raw, dict):
            raise ValueError(f"{path}: expected a mapping of headwords")

        entries = []
        for word, value in raw.items():
            if isinstance(value, str):
                entries.append(LexiconEntry(str(word), value))
            elif isinstance(value, dict) and isinstance(value.get("definition"), str):
                entries.append(LexiconEntry(str(word), value["definition"], value.get("source") or ""))
            else:
                raise ValueError(f"{path}: entry {word!r} has no definition")
        try:
            lexicon = cls(entries)
        except ValueError as exc:
            raise ValueError(f"{path}: {exc}") from exc
        logger.info("Loaded %d lexicon entries from %s", len(lexicon), path)
        return lexicon

    def lookup(self, word):
        """Return the definition for *word*, or None if it is not listed."""
        entry = self.entries.get(word.strip().lower())
        return entry.definition if entry is not None else None

    def get(self, word):
        return self.entries.get(word.strip().lower())

    def words(self):
        return sorted(self.entries)

    def __len__(self):
        return len(self.entries)

    def __contains__(self, word):
        return word.strip().lower() in self.entries


# ── Word-list input ─────────────────────────────────────────────────────────


def expand_home(path):
    """Expand a leading ``~/`` using $HOME; anything else is returned as is."""
    path = str(path)
    if path.startswith("~/"):
        home = os.environ.get("HOME")
        if home:
            return f"{home.rstrip('/')}/{path[2:]}"
    return path


def read_words(path):
    """Read a newline-separated word list.

    Everything after ``#`` on a line is ignored, tokens are trimmed, and
    blank results are skipped.  I/O errors propagate to the caller.
    """
    words = []
    with open(path, encoding="utf-8") as f:
        for line in f:
            token = line.split("#", 1)[0].strip()
            if token:
                words.append(token)
    return words

"""Morpheme data model shared by the segmenter and the embedding table.

A ``Morpheme`` is what the segmenter emits for one position in a word; a
``MorphemeKey`` is the hashable, totally ordered handle the embedding table
files accumulators under.  Keys sort by kind first (prefix < root < suffix),
then by text, which is what makes the final matrix listing reproducible.
"""

from dataclasses import dataclass
from enum import IntEnum


class MorphemeKind(IntEnum):
    PREFIX = 0
    ROOT = 1
    SUFFIX = 2

    @property
    def label(self):
        return self.name.lower()


@dataclass(frozen=True)
class Morpheme:
    kind: MorphemeKind
    text: str

    @property
    def key(self):
        return MorphemeKey.from_morpheme(self)

    def display(self):
        """Render as ``kind(text)``, e.g. ``prefix(anti)``."""
        return f"{self.kind.label}({self.text})"


@dataclass(frozen=True, order=True)
class MorphemeKey:
    kind: MorphemeKind
    text: str

    @classmethod
    def from_morpheme(cls, morpheme):
        return cls(morpheme.kind, morpheme.text)

    def describe(self):
        """Render as ``kind:text``, e.g. ``suffix:ation``."""
        return f"{self.kind.label}:{self.text}"

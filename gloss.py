"""Console rendering for morpheme embedding runs.

Three views:
  - a per-word report: morpheme breakdown plus the definition used
  - an interlinear gloss: words over their morphemes over the morpheme kinds
  - the derived embedding matrix, one row per morpheme in key order

Usage:
    python gloss.py                  # every bundled lexicon word
    python gloss.py ~/words.txt      # one word per line, '#' comments
    python gloss.py words.txt --gloss --verbose
"""

import argparse
import logging
import sys

from lexicon.lexicon import expand_home, read_words
from morpho_embed import MorphemeEmbedder

_MATRIX_LABEL_WIDTH = 22


def format_breakdown(morphemes):
    """``prefix(de) + root(fenestr) + suffix(ation)``"""
    return " + ".join(m.display() for m in morphemes)


def format_outcome(outcome):
    """Return the report lines for a single word outcome."""
    if outcome.status == "unmatched":
        return [f"- {outcome.word}: no entry available in the bundled lexicon"]
    if outcome.status == "unsegmentable":
        return [f"- {outcome.word}: no morphemic chunks produced by the segmenter"]
    return [
        f"- {outcome.word}: {format_breakdown(outcome.morphemes)}",
        f"  definition: {outcome.definition}",
    ]


def format_vector(vector):
    return "[" + ", ".join(f"{value:.3f}" for value in vector) + "]"


def format_matrix(run):
    """Header line plus one ``kind:text -> [...]`` row per morpheme."""
    lines = [
        f"Derived morpheme embedding matrix "
        f"({len(run.table)} morphemes × {run.dimensions or 0} features):"
    ]
    for key, vector in run.table.items():
        lines.append(f"  {key.describe():<{_MATRIX_LABEL_WIDTH}} -> {format_vector(vector)}")
    return "\n".join(lines)


def format_gloss(outcomes):
    """Format matched words as a three-row interlinear gloss."""
    words = []
    pieces_col = []
    kinds_col = []
    for outcome in outcomes:
        if outcome.status != "matched":
            continue
        words.append(outcome.word)
        pieces_col.append("-".join(m.text for m in outcome.morphemes))
        kinds_col.append("-".join(m.kind.name for m in outcome.morphemes))

    if not words:
        return ""

    # Column widths based on the widest cell in each column
    widths = [
        max(len(w), len(p), len(k))
        for w, p, k in zip(words, pieces_col, kinds_col)
    ]

    pad = "  "
    row_words = pad.join(w.ljust(n) for w, n in zip(words, widths))
    row_pieces = pad.join(p.ljust(n) for p, n in zip(pieces_col, widths))
    row_kinds = pad.join(k.ljust(n) for k, n in zip(kinds_col, widths))

    return "\n".join(row.rstrip() for row in (row_words, row_pieces, row_kinds))


def format_run(run, lexicon=None):
    """Full console report for an ``EmbeddingRun``.

    When *lexicon* is given, each definition line also names its source.
    """
    lines = []
    for outcome in run.outcomes:
        report = format_outcome(outcome)
        if lexicon is not None and outcome.status == "matched":
            entry = lexicon.get(outcome.word)
            if entry is not None and entry.source:
                report[-1] += f" ({entry.source})"
        lines.extend(report)

    if run.matched_count == 0:
        lines.append(
            "No lexicon entries matched the provided words. "
            "Try using the bundled examples."
        )
        return "\n".join(lines)

    lines.append("")
    lines.append(format_matrix(run))
    return "\n".join(lines)


# ── Command line ────────────────────────────────────────────────────────────


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Derive morpheme embeddings from bundled dictionary definitions"
    )
    parser.add_argument(
        "wordlist",
        nargs="?",
        help="Newline-separated word list (default: every bundled lexicon word)",
    )
    parser.add_argument(
        "--gloss",
        action="store_true",
        help="Also print an interlinear gloss of the matched words",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable informational logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    embedder = MorphemeEmbedder()
    if args.wordlist:
        try:
            words = read_words(expand_home(args.wordlist))
        except OSError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 1
    else:
        words = embedder.lexicon.words()

    if not words:
        print(
            "No words supplied; provide a newline separated list "
            "or rely on the built-in sample."
        )
        return 0

    print(f"Processing {len(words)} words...")
    run = embedder.run(words)
    print(format_run(run, embedder.lexicon))
    if args.gloss and run.matched_count:
        print()
        print(format_gloss(run.outcomes))
    return 0


if __name__ == "__main__":
    sys.exit(main())

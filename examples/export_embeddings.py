"""Export the morpheme embedding matrix for a word list to CSV.

Reads words.txt (or the path given as the first argument), runs the
embedding pipeline, and writes one row per morpheme to
morpheme_embeddings.csv in this directory.

Usage:
    python examples/export_embeddings.py [WORDLIST]
"""

import csv
import os
import sys

# Allow imports from the parent directory
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from lexicon.lexicon import expand_home, read_words
from morpho_embed import embed
from semantics.features import FEATURE_NAMES

WORDS_PATH = os.path.join(os.path.dirname(__file__), "words.txt")
OUTPUT_PATH = os.path.join(os.path.dirname(__file__), "morpheme_embeddings.csv")

CSV_FIELDS = ["kind", "morpheme", "count", *FEATURE_NAMES]


def main(words_path=WORDS_PATH, output_path=OUTPUT_PATH):
    words = read_words(expand_home(words_path))
    print(f"Read {len(words)} words from {words_path}")

    run = embed(words)
    skipped = [o.word for o in run.outcomes if o.status != "matched"]
    if skipped:
        print(f"  skipped {len(skipped)}: {', '.join(skipped)}")

    print(f"Writing {len(run.table)} morphemes to {output_path}")
    with open(output_path, "w", newline="", encoding="utf-8") as fout:
        writer = csv.DictWriter(fout, fieldnames=CSV_FIELDS)
        writer.writeheader()
        for key, vector in run.table.items():
            row = {
                "kind": key.kind.label,
                "morpheme": key.text,
                "count": run.table.accumulators[key].count,
            }
            row.update({name: f"{value:.6f}" for name, value in zip(FEATURE_NAMES, vector)})
            writer.writerow(row)

    print("Done.")


if __name__ == "__main__":
    main(*sys.argv[1:2])

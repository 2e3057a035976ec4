"""Tests for greedy prefix / root / suffix segmentation."""

import pytest

from morphology.morpheme import Morpheme, MorphemeKind
from morphology.segmenter import (
    FALLBACK_CHUNK_SIZE,
    MorphemeSegmenter,
    clean_word,
    load_patterns,
)

P, R, S = MorphemeKind.PREFIX, MorphemeKind.ROOT, MorphemeKind.SUFFIX


def _pairs(morphemes):
    return [(m.kind, m.text) for m in morphemes]


# ── Bundled tables ──────────────────────────────────────────────────────────


@pytest.mark.parametrize("word, expected", [
    ("antidisestablishmentarianism",
     [(P, "anti"), (P, "dis"), (R, "establish"), (S, "ment"), (S, "arianism")]),
    ("hypermetamorphosis", [(P, "hyper"), (R, "meta"), (R, "morph"), (S, "osis")]),
    ("biblioklept", [(R, "biblio"), (R, "klept")]),
    ("defenestration", [(P, "de"), (R, "fenestr"), (S, "ation")]),
    ("absquatulate", [(P, "ab"), (R, "squat"), (S, "ulate")]),
    ("cattywampus", [(R, "cattywampus")]),
    ("transmogrification", [(P, "trans"), (R, "mogr"), (S, "ification")]),
    ("sesquipedalian", [(P, "sesqui"), (R, "pedal"), (S, "ian")]),
    ("kerfuffle", [(R, "kerfuffle")]),
])
def test_bundled_words(segmenter, word, expected):
    assert _pairs(segmenter.segment(word)) == expected


def test_bundled_segments_tile_the_word(segmenter, bundled_lexicon):
    for word in bundled_lexicon.words():
        morphemes = segmenter.segment(word)
        assert morphemes
        assert "".join(m.text for m in morphemes) == word


def test_kinds_are_grouped_in_order(segmenter):
    kinds = [m.kind for m in segmenter.segment("antidisestablishmentarianism")]
    assert kinds == sorted(kinds)


def test_bundled_tables_load():
    prefixes, suffixes, roots = load_patterns()
    assert prefixes[:2] == ["hyper", "trans"]
    # Table order is part of the contract: "ification" shadows "mogrification".
    assert suffixes.index("ification") < suffixes.index("mogrification")
    assert "kerfuffle" in roots


# ── Cleaning ─────────────────────────────────────────────────────────────────


def test_clean_word():
    assert clean_word("Ker-fuffle!") == "kerfuffle"
    assert clean_word("  DeFenestration\n") == "defenestration"
    assert clean_word("café") == "caf"
    assert clean_word("123 !!") == ""


def test_segment_cleans_input(segmenter):
    assert segmenter.segment("KER fuffle.") == segmenter.segment("kerfuffle")


def test_empty_after_cleaning(segmenter):
    assert segmenter.segment("") == []
    assert segmenter.segment("42-17") == []


# ── Prefix stripping ────────────────────────────────────────────────────────


def test_prefix_first_match_wins_over_longest():
    short_first = MorphemeSegmenter(prefixes=["a", "ab"], suffixes=[], roots=[])
    long_first = MorphemeSegmenter(prefixes=["ab", "a"], suffixes=[], roots=[])
    assert short_first.strip_prefixes("abcd") == (["a"], "bcd")
    assert long_first.strip_prefixes("abcd") == (["ab"], "cd")


def test_prefixes_repeat():
    seg = MorphemeSegmenter(prefixes=["re"], suffixes=[], roots=[])
    assert seg.strip_prefixes("rerewrite") == (["re", "re"], "write")


def test_prefix_may_not_consume_everything():
    seg = MorphemeSegmenter(prefixes=["ab"], suffixes=[], roots=[])
    assert seg.strip_prefixes("ab") == ([], "ab")
    assert _pairs(seg.segment("ab")) == [(R, "ab")]


def test_prefix_guard_applies_to_first_match_only():
    # "abc" matches first and would eat the word; "a" is never tried.
    seg = MorphemeSegmenter(prefixes=["abc", "a"], suffixes=[], roots=[])
    assert seg.strip_prefixes("abc") == ([], "abc")


def test_prefix_guard_allows_one_character_left():
    seg = MorphemeSegmenter(prefixes=["ab"], suffixes=[], roots=[])
    assert seg.strip_prefixes("abc") == (["ab"], "c")


# ── Suffix stripping ────────────────────────────────────────────────────────


def test_suffixes_emitted_innermost_first():
    seg = MorphemeSegmenter(prefixes=[], suffixes=["ness", "ful"], roots=[])
    assert seg.strip_suffixes("hopefulness") == (["ness", "ful"], "hope")
    assert _pairs(seg.segment("hopefulness")) == [
        (R, "hope"), (S, "ful"), (S, "ness"),
    ]


def test_suffix_may_not_consume_everything():
    seg = MorphemeSegmenter(prefixes=[], suffixes=["ism"], roots=[])
    assert _pairs(seg.segment("ism")) == [(R, "ism")]


def test_suffixes_strip_after_prefixes():
    # The prefix takes "un"; the suffix may then not take all of "ness".
    seg = MorphemeSegmenter(prefixes=["un"], suffixes=["ness"], roots=[])
    assert _pairs(seg.segment("unness")) == [(P, "un"), (R, "ness")]


# ── Root decomposition ──────────────────────────────────────────────────────


def test_fallback_chunking(bare_segmenter):
    assert FALLBACK_CHUNK_SIZE == 4
    assert bare_segmenter.decompose_root("abcdefghij") == ["abcd", "efgh", "ij"]
    assert bare_segmenter.decompose_root("abcdefgh") == ["abcd", "efgh"]
    assert bare_segmenter.decompose_root("abc") == ["abc"]
    assert bare_segmenter.decompose_root("") == []


def test_custom_chunk_size():
    seg = MorphemeSegmenter(prefixes=[], suffixes=[], roots=[], chunk_size=3)
    assert seg.decompose_root("abcdefghij") == ["abc", "def", "ghi", "j"]


def test_invalid_chunk_size():
    with pytest.raises(ValueError):
        MorphemeSegmenter(chunk_size=0)


def test_root_patterns_mix_with_chunks():
    seg = MorphemeSegmenter(prefixes=[], suffixes=[], roots=["xy"])
    assert seg.decompose_root("xyabcdefxy") == ["xy", "abcd", "efxy"]


def test_root_pattern_first_match_wins():
    seg = MorphemeSegmenter(prefixes=[], suffixes=[], roots=["ped", "pedal"])
    assert seg.decompose_root("pedal") == ["ped", "al"]


def test_empty_patterns_never_match():
    seg = MorphemeSegmenter(prefixes=["", "de"], suffixes=[""], roots=[""])
    assert _pairs(seg.segment("defenestr")) == [
        (P, "de"), (R, "fene"), (R, "str"),
    ]


def test_every_nonempty_word_yields_a_root(bare_segmenter):
    for word in ["a", "zz", "abcd", "abcde", "transmogrification"]:
        morphemes = bare_segmenter.segment(word)
        assert any(m.kind is R for m in morphemes)
        assert "".join(m.text for m in morphemes) == word


# ── Data model ──────────────────────────────────────────────────────────────


def test_morpheme_display_and_key():
    m = Morpheme(MorphemeKind.SUFFIX, "ation")
    assert m.display() == "suffix(ation)"
    assert m.key.describe() == "suffix:ation"
    assert m.key == Morpheme(MorphemeKind.SUFFIX, "ation").key


def test_key_ordering():
    keys = [
        Morpheme(S, "ation").key,
        Morpheme(R, "mogr").key,
        Morpheme(P, "trans").key,
        Morpheme(R, "meta").key,
        Morpheme(P, "anti").key,
    ]
    assert [k.describe() for k in sorted(keys)] == [
        "prefix:anti", "prefix:trans", "root:meta", "root:mogr", "suffix:ation",
    ]


# ── Table loading ───────────────────────────────────────────────────────────


def test_load_patterns_from_file(tmp_path):
    path = tmp_path / "patterns.yaml"
    path.write_text("prefixes: [Re, ' un ']\nsuffixes: [ness]\n", encoding="utf-8")
    prefixes, suffixes, roots = load_patterns(path)
    assert prefixes == ["re", "un"]
    assert suffixes == ["ness"]
    assert roots == []


def test_load_patterns_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_patterns(tmp_path / "nope.yaml")


def test_load_patterns_rejects_non_list(tmp_path):
    path = tmp_path / "patterns.yaml"
    path.write_text("prefixes: re\n", encoding="utf-8")
    with pytest.raises(ValueError, match="prefixes"):
        load_patterns(path)


def test_load_patterns_rejects_bad_yaml(tmp_path):
    path = tmp_path / "patterns.yaml"
    path.write_text("prefixes: [re\n", encoding="utf-8")
    with pytest.raises(ValueError, match="invalid YAML"):
        load_patterns(path)

from pathlib import Path

import pytest

from pronoun_eval.config import CorpusSettings
from pronoun_eval.corpus import AlignedCorpus, load_corpus, parse_alignment_line
from pronoun_eval.errors import CorpusFormatError
from tests.utils import make_corpus, write_corpus


def test_parse_alignment_line_reads_pharaoh_links():
    assert parse_alignment_line("0-0 1-2  2-1") == [(0, 0), (1, 2), (2, 1)]
    assert parse_alignment_line("") == []
    with pytest.raises(ValueError):
        parse_alignment_line("0:1")


def test_corpus_side_indexes_tokens_globally():
    corpus = make_corpus(
        [
            ("it went well", "ça s'est bien passé", "0-0 1-1 1-3 2-2"),
            ("they came", "ils sont venus", "0-0 1-1 1-2"),
        ]
    )
    source = corpus.source
    assert source.size() == 5
    assert source.sentence_count() == 2
    assert source.element_at(3) == "they"
    assert source.sentence_start(1) == 3
    assert source.find_sentence(2) == 0
    assert source.find_sentence(3) == 1
    assert source.aligned_elements(1) == ["s'est", "passé"]
    assert source.aligned_elements(4) == ["sont", "venus"]
    assert corpus.target.aligned_elements(4) == ["they"]


def test_sentence_as_string_can_stop_at_token():
    corpus = make_corpus([("so it goes", "ainsi va", "0-0 2-1"), ("it is", "c'est", "0-0 1-0")])
    assert corpus.source.sentence_as_string(0) == "so it goes"
    assert corpus.source.sentence_as_string(0, 1) == "so it"
    assert corpus.source.sentence_as_string(1) == "it is"


def test_unaligned_and_duplicate_links():
    corpus = make_corpus([("it rains", "il pleut", "0-0 0-0 1-1")])
    assert corpus.source.aligned_elements(0) == ["il"]
    empty = make_corpus([("it rains", "il pleut", "")])
    assert empty.source.aligned_elements(0) == []


def test_out_of_range_link_is_rejected():
    with pytest.raises(CorpusFormatError):
        make_corpus([("it", "ça", "0-1")])


def test_sentence_counts_must_agree():
    with pytest.raises(CorpusFormatError):
        AlignedCorpus.from_sentences([["it"]], [["ça"], ["x"]], [[(0, 0)]])


def test_sentence_start_out_of_range():
    corpus = make_corpus([("it", "ça", "0-0")])
    with pytest.raises(IndexError):
        corpus.source.sentence_start(1)


def test_load_corpus_reads_stem_files(tmp_path: Path):
    stem = write_corpus(
        tmp_path / "ref",
        [("It rained .", "Il a plu .", "0-0 1-1 1-2 2-3"), ("", "", "")],
    )
    corpus = load_corpus(stem)
    assert corpus.source.sentence_count() == 2
    assert corpus.source.size() == 3
    assert corpus.source.aligned_elements(1) == ["a", "plu"]


def test_load_corpus_honours_custom_suffixes(tmp_path: Path):
    (tmp_path / "c.en").write_text("it works\n", encoding="utf-8")
    (tmp_path / "c.fr").write_text("ça marche\n", encoding="utf-8")
    (tmp_path / "c.wa").write_text("0-0 1-1\n", encoding="utf-8")
    settings = CorpusSettings(source_suffix="en", target_suffix="fr", alignment_suffix="wa")
    corpus = load_corpus(tmp_path / "c", settings)
    assert corpus.source.aligned_elements(0) == ["ça"]


def test_load_corpus_reports_bad_alignment_line(tmp_path: Path):
    stem = write_corpus(tmp_path / "bad", [("it works", "ça marche", "0-0 1_1")])
    with pytest.raises(CorpusFormatError, match=r"bad\.align:1"):
        load_corpus(stem)


def test_load_corpus_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_corpus(tmp_path / "missing")

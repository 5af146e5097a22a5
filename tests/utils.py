from __future__ import annotations

from pathlib import Path

from pronoun_eval.corpus import AlignedCorpus, parse_alignment_line
from pronoun_eval.models import DocumentBoundary, DocumentSegmentation
from pronoun_eval.segmenter import build_segments

Sentence = tuple[str, str, str]


def make_corpus(sentences: list[Sentence]) -> AlignedCorpus:
    """Build an in-memory corpus from (source, target, alignment) line triples."""
    return AlignedCorpus.from_sentences(
        [src.split() for src, _, _ in sentences],
        [tgt.split() for _, tgt, _ in sentences],
        [parse_alignment_line(align) for _, _, align in sentences],
    )


def write_corpus(stem: Path, sentences: list[Sentence]) -> Path:
    """Write stem.src, stem.tgt and stem.align files and return the stem."""
    stem.parent.mkdir(parents=True, exist_ok=True)
    for suffix, column in (("src", 0), ("tgt", 1), ("align", 2)):
        lines = [sentence[column] for sentence in sentences]
        Path(f"{stem}.{suffix}").write_text("\n".join(lines) + "\n", encoding="utf-8")
    return stem


def single_document(corpus: AlignedCorpus, doc_id: str = "doc") -> DocumentSegmentation:
    return build_segments(corpus.source, [DocumentBoundary(sentence=0, doc_id=doc_id)])

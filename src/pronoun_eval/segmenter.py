from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List

from .corpus import CorpusSide
from .errors import ConfigurationError
from .models import DocumentBoundary, DocumentSegmentation, DocumentSummary

LOGGER = logging.getLogger(__name__)


def parse_boundary_line(line: str, position: int) -> DocumentBoundary:
    """
    Parse one line of a document-boundary file.

    The first field is a 0-based sentence number. Anything after the first
    whitespace run is the document label; without one the label defaults to
    ``"Document {position}"``.
    """
    fields = line.strip().split(None, 1)
    if not fields:
        raise ConfigurationError("Invalid line in doc boundary file: empty line", line)
    try:
        sentence = int(fields[0])
    except ValueError as exc:
        raise ConfigurationError(
            f"Invalid line in doc boundary file: {line!r}", line
        ) from exc
    doc_id = fields[1].strip() if len(fields) == 2 else f"Document {position}"
    return DocumentBoundary(sentence=sentence, doc_id=doc_id)


def parse_boundaries(lines: Iterable[str]) -> List[DocumentBoundary]:
    return [parse_boundary_line(line, pos) for pos, line in enumerate(lines)]


def read_boundaries(path: str | Path, encoding: str = "utf-8") -> List[DocumentBoundary]:
    """Read and parse a document-boundary file."""
    with Path(path).open("r", encoding=encoding) as handle:
        return parse_boundaries(line.rstrip("\r\n") for line in handle)


def build_segments(
    side: CorpusSide, boundaries: List[DocumentBoundary]
) -> DocumentSegmentation:
    """Translate sentence boundaries into token boundaries with empty summaries."""
    if not boundaries:
        raise ConfigurationError("Document boundary file defines no documents.")

    starts: List[int] = []
    summaries: List[DocumentSummary] = []
    num_sentences = side.sentence_count()
    previous = -1
    for boundary in boundaries:
        if not 0 <= boundary.sentence < num_sentences:
            raise ConfigurationError(
                f"Document '{boundary.doc_id}' starts at sentence {boundary.sentence}, "
                f"outside the corpus (0-{num_sentences - 1})."
            )
        if boundary.sentence <= previous:
            raise ConfigurationError(
                f"Document '{boundary.doc_id}' starts at sentence {boundary.sentence}, "
                f"not after the previous document (sentence {previous})."
            )
        previous = boundary.sentence
        starts.append(side.sentence_start(boundary.sentence))
        summaries.append(DocumentSummary(doc_id=boundary.doc_id))

    if boundaries[0].sentence > 0:
        LOGGER.warning(
            "First document starts at sentence %d; earlier sentences count towards '%s'.",
            boundaries[0].sentence,
            boundaries[0].doc_id,
        )
    starts.append(side.size())
    return DocumentSegmentation(starts=starts, summaries=summaries)

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field


@dataclass(slots=True)
class DocumentSummary:
    """Per-document pronoun counts, keyed by lowercase pronoun."""

    doc_id: str
    refoccurrences: Counter[str] = field(default_factory=Counter)
    candoccurrences: Counter[str] = field(default_factory=Counter)
    matches: Counter[str] = field(default_factory=Counter)


@dataclass(slots=True)
class DocumentBoundary:
    """A parsed line of the document-boundary file."""

    sentence: int
    doc_id: str


@dataclass(slots=True)
class DocumentSegmentation:
    """Token-index start of every document plus a closing sentinel."""

    starts: list[int]
    summaries: list[DocumentSummary]

    @property
    def num_documents(self) -> int:
        return len(self.summaries)


@dataclass(slots=True)
class PronounScore:
    """Totals and metrics for one pronoun class across all documents."""

    pronoun: str
    matches: int
    ref_occurrences: int
    cand_occurrences: int
    precision: float
    recall: float
    f1: float


@dataclass(slots=True)
class DocumentRow:
    """One row of the per-document breakdown table."""

    doc_id: str
    counts: dict[str, tuple[int, int]]
    matches: int
    ref_occurrences: int
    recall: float


@dataclass(slots=True)
class EvaluationReport:
    """Aggregated results of a pronoun evaluation run."""

    pronouns: list[str]
    documents: list[DocumentRow]
    pronoun_scores: dict[str, PronounScore]
    table_matches: int
    table_ref_occurrences: int
    table_recall: float
    total_matches: int
    total_ref_occurrences: int
    total_cand_occurrences: int
    precision: float
    recall: float
    f1: float
    macro_precision: float
    macro_recall: float
    macro_f1: float

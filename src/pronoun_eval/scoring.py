from __future__ import annotations

from collections import Counter
from typing import Dict, Iterable, List

import numpy as np

from .models import DocumentRow, DocumentSummary, EvaluationReport, PronounScore


def ratio(numerator: float, denominator: float) -> float:
    """Single-precision division where x/0 gives inf and 0/0 gives nan."""
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float32(numerator) / np.float32(denominator))


def f_score(precision: float, recall: float) -> float:
    """Harmonic mean of precision and recall; nan when both are zero."""
    return ratio(2.0 * precision * recall, precision + recall)


def reporting_pronouns(summaries: Iterable[DocumentSummary]) -> List[str]:
    """Pronouns that occur in the candidate alignments of any document, sorted."""
    pronouns: set[str] = set()
    for summary in summaries:
        pronouns.update(summary.candoccurrences.keys())
    return sorted(pronouns)


def _harmonic_macro(values: List[float]) -> float:
    if not values:
        return float("nan")
    with np.errstate(divide="ignore", invalid="ignore"):
        mean_reciprocal = np.mean(1.0 / np.asarray(values, dtype=np.float64))
        return float(1.0 / mean_reciprocal)


def build_report(summaries: List[DocumentSummary]) -> EvaluationReport:
    """Fold per-document counts into per-pronoun and corpus-level metrics."""
    pronouns = reporting_pronouns(summaries)

    rows: List[DocumentRow] = []
    table_matches = 0
    table_occurrences = 0
    for summary in summaries:
        counts: Dict[str, tuple[int, int]] = {}
        doc_matches = 0
        doc_occurrences = 0
        for pronoun in pronouns:
            m = summary.matches[pronoun]
            o = summary.refoccurrences[pronoun]
            counts[pronoun] = (m, o)
            doc_matches += m
            doc_occurrences += o
        rows.append(
            DocumentRow(
                doc_id=summary.doc_id,
                counts=counts,
                matches=doc_matches,
                ref_occurrences=doc_occurrences,
                recall=ratio(doc_matches, doc_occurrences),
            )
        )
        table_matches += doc_matches
        table_occurrences += doc_occurrences

    matches: Counter[str] = Counter()
    refoccurrences: Counter[str] = Counter()
    candoccurrences: Counter[str] = Counter()
    for summary in summaries:
        matches.update(summary.matches)
        refoccurrences.update(summary.refoccurrences)
        candoccurrences.update(summary.candoccurrences)

    scores: Dict[str, PronounScore] = {}
    for pronoun in sorted(set(refoccurrences) | set(candoccurrences)):
        m = matches[pronoun]
        precision = ratio(m, candoccurrences[pronoun])
        recall = ratio(m, refoccurrences[pronoun])
        scores[pronoun] = PronounScore(
            pronoun=pronoun,
            matches=m,
            ref_occurrences=refoccurrences[pronoun],
            cand_occurrences=candoccurrences[pronoun],
            precision=precision,
            recall=recall,
            f1=f_score(precision, recall),
        )

    total_matches = sum(matches.values())
    total_ref = sum(refoccurrences.values())
    total_cand = sum(candoccurrences.values())
    precision = ratio(total_matches, total_cand)
    recall = ratio(total_matches, total_ref)

    macro_precision = _harmonic_macro([s.precision for s in scores.values()])
    macro_recall = _harmonic_macro([s.recall for s in scores.values()])

    return EvaluationReport(
        pronouns=pronouns,
        documents=rows,
        pronoun_scores=scores,
        table_matches=table_matches,
        table_ref_occurrences=table_occurrences,
        table_recall=ratio(table_matches, table_occurrences),
        total_matches=total_matches,
        total_ref_occurrences=total_ref,
        total_cand_occurrences=total_cand,
        precision=precision,
        recall=recall,
        f1=f_score(precision, recall),
        macro_precision=macro_precision,
        macro_recall=macro_recall,
        macro_f1=f_score(macro_precision, macro_recall),
    )

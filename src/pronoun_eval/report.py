from __future__ import annotations

import math
from typing import Any, Callable, Dict, List

import pandas as pd

from .models import EvaluationReport, PronounScore

LABEL_PAD = " " * 20


class ReportWriter:
    """Render an EvaluationReport as the fixed-width text report."""

    def __init__(self, verbosity: int = 0, echo: Callable[[str], None] = print) -> None:
        self.verbosity = verbosity
        self._echo = echo

    def write(self, report: EvaluationReport) -> None:
        if self.verbosity >= 1:
            for line in document_table_lines(report):
                self._echo(line)
            for line in pronoun_table_lines(report):
                self._echo(line)
        for line in summary_lines(report):
            self._echo(line)


def document_table_lines(report: EvaluationReport) -> List[str]:
    """Header, one row per document and a totals row, followed by a blank line."""
    lines = [LABEL_PAD + "".join(f"{p:>9}   " for p in report.pronouns)]
    for row in report.documents:
        cells = []
        for pronoun in report.pronouns:
            m, o = row.counts[pronoun]
            cells.append(f"{m:4d}/{o:4d}   " if o > 0 else "   -/   -   ")
        lines.append(
            f"{row.doc_id:>18}  "
            + "".join(cells)
            + f"{row.matches:4d}/{row.ref_occurrences:4d}   {row.recall:.4f}"
        )

    totals = []
    for pronoun in report.pronouns:
        score = report.pronoun_scores[pronoun]
        totals.append(f"{score.matches:4d}/{score.ref_occurrences:4d}   ")
    lines.append(
        LABEL_PAD
        + "".join(totals)
        + f"{report.table_matches:4d}/{report.table_ref_occurrences:4d}   "
        + f"{report.table_recall:.4f}"
    )
    lines.append("")
    return lines


def pronoun_table_lines(report: EvaluationReport) -> List[str]:
    """Per-pronoun precision, recall and F1, closed by a TOTAL line."""
    lines = [f"{'':10}{'Precision':>21}{'Recall':>21}{'F1':>10}"]
    for score in report.pronoun_scores.values():
        lines.append(_score_line(score.pronoun, score))
    lines.append(
        _score_line(
            "TOTAL",
            PronounScore(
                pronoun="TOTAL",
                matches=report.total_matches,
                ref_occurrences=report.total_ref_occurrences,
                cand_occurrences=report.total_cand_occurrences,
                precision=report.precision,
                recall=report.recall,
                f1=report.f1,
            ),
        )
    )
    lines.append("")
    return lines


def _score_line(label: str, score: PronounScore) -> str:
    return (
        f"{label:<10}"
        f"{score.matches:4d}/{score.cand_occurrences:4d}   {score.precision:.4f}   "
        f"{score.matches:4d}/{score.ref_occurrences:4d}   {score.recall:.4f}   "
        f"{score.f1:.4f}"
    )


def summary_lines(report: EvaluationReport) -> List[str]:
    return [
        f"Precision:   {report.total_matches:4d}/{report.total_cand_occurrences:4d}"
        f"    {report.precision:.4f}",
        f"Recall:      {report.total_matches:4d}/{report.total_ref_occurrences:4d}"
        f"    {report.recall:.4f}",
        f"F1:                       {report.f1:.4f}",
    ]


def _json_float(value: float) -> float | None:
    return None if math.isnan(value) or math.isinf(value) else value


def report_to_dict(report: EvaluationReport) -> Dict[str, Any]:
    """Serialize a report so it can be emitted as JSON."""
    return {
        "pronouns": list(report.pronouns),
        "documents": [
            {
                "doc_id": row.doc_id,
                "counts": {
                    p: {"matches": m, "ref_occurrences": o}
                    for p, (m, o) in row.counts.items()
                },
                "matches": row.matches,
                "ref_occurrences": row.ref_occurrences,
                "recall": _json_float(row.recall),
            }
            for row in report.documents
        ],
        "per_pronoun": {
            p: {
                "matches": s.matches,
                "ref_occurrences": s.ref_occurrences,
                "cand_occurrences": s.cand_occurrences,
                "precision": _json_float(s.precision),
                "recall": _json_float(s.recall),
                "f1": _json_float(s.f1),
            }
            for p, s in report.pronoun_scores.items()
        },
        "total": {
            "matches": report.total_matches,
            "ref_occurrences": report.total_ref_occurrences,
            "cand_occurrences": report.total_cand_occurrences,
            "precision": _json_float(report.precision),
            "recall": _json_float(report.recall),
            "f1": _json_float(report.f1),
        },
        "macro": {
            "precision": _json_float(report.macro_precision),
            "recall": _json_float(report.macro_recall),
            "f1": _json_float(report.macro_f1),
        },
    }


def document_frame(report: EvaluationReport) -> pd.DataFrame:
    """Per-document table with one matches/occurrences column pair per pronoun."""
    records: List[Dict[str, Any]] = []
    for row in report.documents:
        record: Dict[str, Any] = {"doc_id": row.doc_id}
        for pronoun in report.pronouns:
            m, o = row.counts[pronoun]
            record[f"{pronoun}_matches"] = m
            record[f"{pronoun}_ref_occurrences"] = o
        record["matches"] = row.matches
        record["ref_occurrences"] = row.ref_occurrences
        record["recall"] = row.recall
        records.append(record)
    columns = (
        ["doc_id"]
        + [f"{p}_{kind}" for p in report.pronouns for kind in ("matches", "ref_occurrences")]
        + ["matches", "ref_occurrences", "recall"]
    )
    return pd.DataFrame(records, columns=columns)

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from .config import PronounEvalConfig
from .corpus import AlignedCorpus, load_corpus
from .matching import PronounEvaluator
from .models import EvaluationReport
from .report import ReportWriter
from .scoring import build_report
from .segmenter import build_segments, read_boundaries

LOGGER = logging.getLogger(__name__)


def evaluate_corpora(
    reference: AlignedCorpus,
    candidate: AlignedCorpus,
    boundary_path: str | Path,
    verbosity: int = 0,
    echo: Callable[[str], None] = print,
    encoding: str = "utf-8",
) -> EvaluationReport:
    """Segment the reference, run the matching pass and aggregate the results."""
    boundaries = read_boundaries(boundary_path, encoding=encoding)
    segmentation = build_segments(reference.source, boundaries)
    evaluator = PronounEvaluator(
        reference, candidate, segmentation, verbosity=verbosity, echo=echo
    )
    summaries = evaluator.evaluate()
    LOGGER.info("Evaluated %d documents", len(summaries))
    return build_report(summaries)


def run_evaluation(
    reference_stem: str | Path,
    candidate_stem: str | Path,
    boundary_path: str | Path,
    config: PronounEvalConfig,
    verbosity: int = 0,
    echo: Callable[[str], None] = print,
) -> EvaluationReport:
    """Load both corpora, evaluate them and print the text report."""
    reference = load_corpus(reference_stem, config.corpus)
    candidate = load_corpus(candidate_stem, config.corpus)
    report = evaluate_corpora(
        reference,
        candidate,
        boundary_path,
        verbosity=verbosity,
        echo=echo,
        encoding=config.corpus.encoding,
    )
    ReportWriter(verbosity=verbosity, echo=echo).write(report)
    return report

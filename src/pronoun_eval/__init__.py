"""
pronoun_eval package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .config import PronounEvalConfig, config_from_dict, config_from_yaml, load_config
from .corpus import AlignedCorpus, load_corpus
from .matching import PronounEvaluator
from .pipeline import evaluate_corpora, run_evaluation
from .scoring import build_report

__all__ = [
    "PronounEvalConfig",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "AlignedCorpus",
    "load_corpus",
    "PronounEvaluator",
    "build_report",
    "evaluate_corpora",
    "run_evaluation",
]

__version__ = "0.1.0"

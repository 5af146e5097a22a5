"""
Tiny helper script that scores a hand-built corpus without touching disk.
"""

from __future__ import annotations

from pronoun_eval.corpus import AlignedCorpus
from pronoun_eval.matching import PronounEvaluator
from pronoun_eval.models import DocumentBoundary
from pronoun_eval.report import ReportWriter
from pronoun_eval.scoring import build_report
from pronoun_eval.segmenter import build_segments


def main() -> None:
    source = [["The", "cat", "slept", "."], ["It", "was", "warm", "."]]
    reference = AlignedCorpus.from_sentences(
        source,
        [["Le", "chat", "dormait", "."], ["Il", "avait", "chaud", "."]],
        [[(0, 0), (1, 1), (2, 2), (3, 3)], [(0, 0), (1, 1), (2, 2), (3, 3)]],
    )
    candidate = AlignedCorpus.from_sentences(
        source,
        [["Le", "chat", "dormait", "."], ["C'", "était", "chaud", "."]],
        [[(0, 0), (1, 1), (2, 2), (3, 3)], [(0, 0), (1, 1), (2, 2), (3, 3)]],
    )

    segmentation = build_segments(reference.source, [DocumentBoundary(0, "story")])
    summaries = PronounEvaluator(reference, candidate, segmentation, verbosity=2).evaluate()
    print("-" * 40)
    ReportWriter(verbosity=1).write(build_report(summaries))


if __name__ == "__main__":
    main()

from __future__ import annotations

from collections import Counter
from typing import Callable, List

from .corpus import AlignedCorpus
from .errors import CorpusMismatchError
from .models import DocumentSegmentation, DocumentSummary

TRIGGER_WORDS = frozenset({"it", "they", "It", "They"})


def is_trigger_word(token: str) -> bool:
    """Exact match against the trigger list, so the acronym "IT" is not a pronoun."""
    return token in TRIGGER_WORDS


class PronounEvaluator:
    """Compares reference and candidate translations of source pronouns."""

    def __init__(
        self,
        reference: AlignedCorpus,
        candidate: AlignedCorpus,
        segmentation: DocumentSegmentation,
        verbosity: int = 0,
        echo: Callable[[str], None] = print,
    ) -> None:
        ref_size = reference.source.size()
        cand_size = candidate.source.size()
        if ref_size != cand_size:
            raise CorpusMismatchError(ref_size, cand_size)
        self.reference = reference
        self.candidate = candidate
        self.segmentation = segmentation
        self.verbosity = verbosity
        self._echo = echo

    @property
    def summaries(self) -> List[DocumentSummary]:
        return self.segmentation.summaries

    def evaluate(self) -> List[DocumentSummary]:
        """
        Sweep the source corpus once and count pronoun translation matches.

        Summaries are updated in place, so calling this twice on one instance
        counts every occurrence twice.
        """
        starts = self.segmentation.starts
        summaries = self.segmentation.summaries
        source = self.reference.source
        docno = 0
        last_sentence = -1

        for cidx in range(source.size()):
            while cidx >= starts[docno + 1]:
                docno += 1

            token = source.element_at(cidx)
            if not is_trigger_word(token):
                continue
            pronoun = token.lower()
            summary = summaries[docno]

            reftgt = source.aligned_elements(cidx)
            refwords: Counter[str] = Counter()
            for word in reftgt:
                refwords[word] += 1
                summary.refoccurrences[pronoun] += 1

            candtgt = self.candidate.source.aligned_elements(cidx)
            for word in candtgt:
                summary.candoccurrences[pronoun] += 1
                if refwords[word] > 0:
                    summary.matches[pronoun] += 1
                    refwords[word] -= 1

            if self.verbosity >= 2:
                last_sentence = self._trace(cidx, pronoun, reftgt, candtgt, last_sentence)

        return summaries

    def _trace(
        self,
        cidx: int,
        pronoun: str,
        reftgt: List[str],
        candtgt: List[str],
        last_sentence: int,
    ) -> int:
        sentence = self.reference.source.find_sentence(cidx)
        if sentence > last_sentence:
            self._echo("")
            self._echo(self.reference.source.sentence_as_string(sentence, cidx))
            self._echo(self.reference.target.sentence_as_string(sentence))
            self._echo(self.candidate.target.sentence_as_string(sentence))
            last_sentence = sentence
        self._echo(f"{pronoun} ||| {' | '.join(reftgt)} ||| {' | '.join(candtgt)}")
        return last_sentence

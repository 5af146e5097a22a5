from __future__ import annotations

import bisect
import logging
from pathlib import Path
from typing import List, Sequence, Tuple

from .config import CorpusSettings
from .errors import CorpusFormatError

LOGGER = logging.getLogger(__name__)

Link = Tuple[int, int]


class CorpusSide:
    """One language side of a parallel corpus, indexed by global token position."""

    def __init__(self, sentences: Sequence[Sequence[str]]) -> None:
        self._tokens: List[str] = []
        self._sentence_starts: List[int] = []
        for sentence in sentences:
            self._sentence_starts.append(len(self._tokens))
            self._tokens.extend(sentence)
        self._links: List[List[int]] = [[] for _ in self._tokens]
        self._other: CorpusSide | None = None

    def size(self) -> int:
        return len(self._tokens)

    def sentence_count(self) -> int:
        return len(self._sentence_starts)

    def element_at(self, index: int) -> str:
        return self._tokens[index]

    def aligned_elements(self, index: int) -> List[str]:
        """Return the opposite-side tokens aligned to ``index``, in target order."""
        if self._other is None:
            return []
        return [self._other.element_at(j) for j in self._links[index]]

    def sentence_start(self, sentence: int) -> int:
        if sentence < 0 or sentence >= len(self._sentence_starts):
            raise IndexError(
                f"Sentence {sentence} out of range (corpus has "
                f"{len(self._sentence_starts)} sentences)."
            )
        return self._sentence_starts[sentence]

    def sentence_end(self, sentence: int) -> int:
        if sentence + 1 < len(self._sentence_starts):
            return self._sentence_starts[sentence + 1]
        return len(self._tokens)

    def find_sentence(self, index: int) -> int:
        """Return the sentence number containing global token ``index``."""
        if index < 0 or index >= len(self._tokens):
            raise IndexError(f"Token index {index} out of range.")
        return bisect.bisect_right(self._sentence_starts, index) - 1

    def sentence_as_string(self, sentence: int, upto: int | None = None) -> str:
        """Join the tokens of a sentence, optionally stopping after global index ``upto``."""
        start = self.sentence_start(sentence)
        end = self.sentence_end(sentence)
        if upto is not None:
            end = min(end, upto + 1)
        return " ".join(self._tokens[start:end])


class AlignedCorpus:
    """A source side and a target side joined by word alignment links."""

    def __init__(self, source: CorpusSide, target: CorpusSide) -> None:
        self.source = source
        self.target = target
        source._other = target
        target._other = source

    @classmethod
    def from_sentences(
        cls,
        source: Sequence[Sequence[str]],
        target: Sequence[Sequence[str]],
        alignments: Sequence[Sequence[Link]],
    ) -> "AlignedCorpus":
        """
        Build a corpus from tokenized sentences and per-sentence alignment links.

        Each link ``(i, j)`` pairs source position ``i`` with target position ``j``
        inside the same sentence.
        """
        if not (len(source) == len(target) == len(alignments)):
            raise CorpusFormatError(
                "Source, target and alignment sentence counts differ: "
                f"{len(source)}, {len(target)}, {len(alignments)}"
            )
        src_side = CorpusSide(source)
        tgt_side = CorpusSide(target)
        for sentence, links in enumerate(alignments):
            src_start = src_side.sentence_start(sentence)
            tgt_start = tgt_side.sentence_start(sentence)
            src_len = len(source[sentence])
            tgt_len = len(target[sentence])
            for i, j in sorted(set(links)):
                if not (0 <= i < src_len and 0 <= j < tgt_len):
                    raise CorpusFormatError(
                        f"Alignment link {i}-{j} out of range in sentence {sentence} "
                        f"({src_len} source, {tgt_len} target tokens)."
                    )
                src_side._links[src_start + i].append(tgt_start + j)
                tgt_side._links[tgt_start + j].append(src_start + i)
        for links_for_token in tgt_side._links:
            links_for_token.sort()
        return cls(src_side, tgt_side)


def parse_alignment_line(line: str) -> List[Link]:
    """Parse a line of Pharaoh-format links such as ``0-0 1-2 2-1``."""
    links: List[Link] = []
    for item in line.split():
        a, sep, b = item.partition("-")
        if not sep:
            raise ValueError(f"Invalid alignment link: {item!r}")
        links.append((int(a), int(b)))
    return links


def load_corpus(stem: str | Path, settings: CorpusSettings | None = None) -> AlignedCorpus:
    """Load ``<stem>.<source>``, ``<stem>.<target>`` and ``<stem>.<alignment>`` files."""
    if settings is None:
        settings = CorpusSettings()
    src_path = Path(f"{stem}.{settings.source_suffix}")
    tgt_path = Path(f"{stem}.{settings.target_suffix}")
    align_path = Path(f"{stem}.{settings.alignment_suffix}")

    source = [line.split() for line in _read_lines(src_path, settings.encoding)]
    target = [line.split() for line in _read_lines(tgt_path, settings.encoding)]
    alignments: List[List[Link]] = []
    for lineno, line in enumerate(_read_lines(align_path, settings.encoding), start=1):
        try:
            alignments.append(parse_alignment_line(line))
        except ValueError as exc:
            raise CorpusFormatError(f"{align_path}:{lineno}: {exc}") from exc

    try:
        corpus = AlignedCorpus.from_sentences(source, target, alignments)
    except CorpusFormatError as exc:
        raise CorpusFormatError(f"{stem}: {exc}") from exc
    LOGGER.info(
        "Loaded corpus %s: %d sentences, %d source tokens, %d target tokens",
        stem,
        corpus.source.sentence_count(),
        corpus.source.size(),
        corpus.target.size(),
    )
    return corpus


def _read_lines(path: Path, encoding: str) -> List[str]:
    with path.open("r", encoding=encoding) as handle:
        return [line.rstrip("\r\n") for line in handle]

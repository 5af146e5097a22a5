from __future__ import annotations


class PronounEvalError(RuntimeError):
    """Base class for errors raised while preparing or running an evaluation."""


class ConfigurationError(PronounEvalError):
    """Raised for invalid settings or a malformed document-boundary file."""

    def __init__(self, message: str, line: str | None = None) -> None:
        super().__init__(message)
        self.line = line


class CorpusFormatError(PronounEvalError):
    """Raised when corpus or alignment files cannot be parsed."""


class CorpusMismatchError(PronounEvalError):
    """Raised when reference and candidate source sides differ in length."""

    def __init__(self, reference_size: int, candidate_size: int) -> None:
        super().__init__(
            f"Reference and candidate source sizes differ: "
            f"{reference_size} != {candidate_size}"
        )
        self.reference_size = reference_size
        self.candidate_size = candidate_size

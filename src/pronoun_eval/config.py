from __future__ import annotations

import os
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Mapping, MutableMapping

import yaml

from .errors import ConfigurationError

VERBOSITY_LEVELS = (0, 1, 2)


@dataclass(slots=True)
class CorpusSettings:
    """File naming and decoding for corpora addressed by a common stem."""

    source_suffix: str = "src"
    target_suffix: str = "tgt"
    alignment_suffix: str = "align"
    encoding: str = "utf-8"


@dataclass(slots=True)
class PronounEvalConfig:
    """Configuration options for a pronoun evaluation run."""

    verbosity: int = 0
    verbosity_env: str = "PRONOUN_EVAL_VERBOSITY"
    log_level: str = "WARNING"
    corpus: CorpusSettings = field(default_factory=CorpusSettings)

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))


def _build_kwargs(data: Mapping[str, Any]) -> dict[str, Any]:
    allowed = {field.name for field in fields(PronounEvalConfig)}
    kwargs = {key: data[key] for key in data if key in allowed}
    if "corpus" in data:
        corpus_value = data["corpus"]
        if isinstance(corpus_value, CorpusSettings):
            kwargs["corpus"] = corpus_value
        elif isinstance(corpus_value, Mapping):
            kwargs["corpus"] = _build_corpus_settings(corpus_value)
        else:
            kwargs.pop("corpus")
    return kwargs


def _build_corpus_settings(data: Mapping[str, Any]) -> CorpusSettings:
    corpus_allowed = {field.name for field in fields(CorpusSettings)}
    filtered = {key: data[key] for key in data if key in corpus_allowed}
    return CorpusSettings(**filtered)


def config_from_dict(data: Mapping[str, Any] | None) -> PronounEvalConfig:
    """Build a PronounEvalConfig from a dictionary-like input."""
    if data is None:
        return PronounEvalConfig()
    return PronounEvalConfig(**_build_kwargs(data))


def config_from_yaml(path: str | Path) -> PronounEvalConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> PronounEvalConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return PronounEvalConfig()
    return config_from_yaml(path)


def resolve_verbosity(
    config: PronounEvalConfig,
    override: int | None = None,
    environ: Mapping[str, str] | None = None,
) -> int:
    """
    Pick the verbosity level for a run.

    An explicit override wins, then the environment variable named by
    ``config.verbosity_env``, then the configured value.
    """
    if environ is None:
        environ = os.environ
    if override is not None:
        raw: object = override
    elif config.verbosity_env and config.verbosity_env in environ:
        raw = environ[config.verbosity_env]
    else:
        raw = config.verbosity
    try:
        level = int(str(raw).strip())
    except ValueError as exc:
        raise ConfigurationError(f"Invalid verbosity level: {raw!r}") from exc
    if level not in VERBOSITY_LEVELS:
        raise ConfigurationError(
            f"Verbosity must be one of {', '.join(map(str, VERBOSITY_LEVELS))}; got {level}."
        )
    return level

from pathlib import Path

import pytest

from pronoun_eval.config import (
    CorpusSettings,
    PronounEvalConfig,
    config_from_dict,
    config_from_yaml,
    load_config,
    resolve_verbosity,
)
from pronoun_eval.errors import ConfigurationError


def test_defaults():
    cfg = load_config()
    assert cfg.verbosity == 0
    assert cfg.corpus == CorpusSettings()
    assert cfg.to_dict()["corpus"]["alignment_suffix"] == "align"


def test_config_from_dict_ignores_unknown_keys():
    cfg = config_from_dict({"verbosity": 1, "unknown": True, "corpus": {"source_suffix": "en"}})
    assert cfg.verbosity == 1
    assert cfg.corpus.source_suffix == "en"
    assert cfg.corpus.target_suffix == "tgt"


def test_config_from_yaml(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text("log_level: INFO\ncorpus:\n  target_suffix: fr\n", encoding="utf-8")
    cfg = config_from_yaml(path)
    assert cfg.log_level == "INFO"
    assert cfg.corpus.target_suffix == "fr"


def test_config_yaml_must_be_mapping(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text("- 1\n- 2\n", encoding="utf-8")
    with pytest.raises(ValueError):
        config_from_yaml(path)


def test_verbosity_precedence():
    cfg = PronounEvalConfig(verbosity=1)
    env = {"PRONOUN_EVAL_VERBOSITY": "2"}
    assert resolve_verbosity(cfg, environ={}) == 1
    assert resolve_verbosity(cfg, environ=env) == 2
    assert resolve_verbosity(cfg, override=0, environ=env) == 0


@pytest.mark.parametrize("value", ["3", "-1", "loud"])
def test_invalid_verbosity(value: str):
    with pytest.raises(ConfigurationError):
        resolve_verbosity(PronounEvalConfig(), environ={"PRONOUN_EVAL_VERBOSITY": value})

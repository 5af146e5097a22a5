from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import NoReturn

import typer
import yaml

from .config import PronounEvalConfig, load_config, resolve_verbosity
from .errors import (
    ConfigurationError,
    CorpusFormatError,
    CorpusMismatchError,
)
from .pipeline import run_evaluation
from .report import document_frame, report_to_dict

app = typer.Typer(
    help=(
        "Pronoun translation evaluation CLI. "
        "Usage: pronoun-eval evaluate REFERENCE CANDIDATE DOC_BOUNDARIES"
    ),
    no_args_is_help=True,
)


@app.command()
def evaluate(
    reference: Path = typer.Argument(..., help="Reference corpus stem."),
    candidate: Path = typer.Argument(..., help="Candidate corpus stem."),
    doc_boundaries: Path = typer.Argument(
        ..., help="File listing the first sentence (and optional label) of each document."
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    verbosity: int | None = typer.Option(
        None,
        "--verbosity",
        "-v",
        help="0 = summary only, 1 = tables, 2 = tables + alignment trace.",
    ),
    json_output: Path | None = typer.Option(
        None, "--json-output", help="Also write the full results as JSON."
    ),
    csv_output: Path | None = typer.Option(
        None, "--csv-output", help="Also write the per-document table as CSV."
    ),
) -> None:
    """Score candidate pronoun translations against the reference."""
    try:
        cfg = load_config(config)
        level = resolve_verbosity(cfg, verbosity)
    except (ConfigurationError, ValueError, OSError, yaml.YAMLError) as exc:
        _fail(str(exc))
    _configure_logging(cfg)

    try:
        report = run_evaluation(
            reference, candidate, doc_boundaries, cfg, verbosity=level, echo=typer.echo
        )
    except ConfigurationError as exc:
        if exc.line is not None:
            _fail(f"Invalid line in doc boundary file: {exc.line}")
        _fail(str(exc))
    except CorpusMismatchError as exc:
        _fail(
            "Reference and candidate corpora differ in size: "
            f"{exc.reference_size} source tokens in reference, "
            f"{exc.candidate_size} in candidate."
        )
    except CorpusFormatError as exc:
        _fail(f"Invalid corpus: {exc}")
    except UnicodeDecodeError as exc:
        _fail(f"Cannot decode input: {exc}")
    except OSError as exc:
        _fail(f"Cannot read input: {exc}")

    try:
        if json_output is not None:
            json_output.parent.mkdir(parents=True, exist_ok=True)
            json_output.write_text(
                json.dumps(report_to_dict(report), indent=2), encoding="utf-8"
            )
        if csv_output is not None:
            csv_output.parent.mkdir(parents=True, exist_ok=True)
            document_frame(report).to_csv(csv_output, index=False)
    except OSError as exc:
        _fail(f"Cannot write output: {exc}")


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = PronounEvalConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    """Console entry point; usage errors exit with status 1 like every other failure."""
    try:
        app()
    except SystemExit as exc:
        if exc.code == 2:
            raise SystemExit(1) from None
        raise


def _configure_logging(config: PronounEvalConfig) -> None:
    level = logging.getLevelName(config.log_level.upper())
    if not isinstance(level, int):
        _fail(f"Unknown log level: {config.log_level}")
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _fail(message: str) -> NoReturn:
    typer.echo(message, err=True)
    raise typer.Exit(code=1)


if __name__ == "__main__":
    main()

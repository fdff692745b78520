"""CLI entrypoint for judge-gate — typer app with a `validate` command."""

import asyncio
import sys
from pathlib import Path

import structlog
import typer

from judge_gate.config.infrastructure.observer import StructlogConfigObserver
from judge_gate.config.infrastructure.yaml_loader import YamlConfigLoader
from judge_gate.core.errors import JudgeGateError
from judge_gate.gate.application.pipeline import (
    all_gates_passed,
    run_gates,
    summarize_gates,
)
from judge_gate.gate.application.response_validation import ResponseValidationGate
from judge_gate.gate.domain.gate import Gate
from judge_gate.gate.domain.task import Task
from judge_gate.gate.infrastructure.factory import create_judge_gate
from judge_gate.gate.infrastructure.observer import StructlogGateObserver

app = typer.Typer(add_completion=False)


@app.callback()
def main() -> None:
    """Judge task outputs with a second language model."""


def _configure_structlog(log_format: str) -> None:
    """Configure structlog based on the requested format.

    Logs go to stderr so that stdout carries only gate results.
    """
    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
    elif log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        typer.echo(f"Invalid log format: {log_format!r}. Must be 'console' or 'json'.")
        raise typer.Exit(code=1)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(0),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


@app.command()
def validate(
    config_path: Path = typer.Argument(..., help="Path to gate config YAML"),
    title: str = typer.Option(..., "--title", help="Title of the task being judged"),
    description: str = typer.Option(
        "",
        "--description",
        help="Requirements the output must satisfy",
    ),
    output_file: Path = typer.Option(
        ...,
        "--output-file",
        "-f",
        help="File holding the output to judge",
    ),
    response_check: bool = typer.Option(
        False,
        "--response-check",
        help="Run cheap response validation before calling the judge",
    ),
    log_format: str = typer.Option(
        "console",
        "--log-format",
        help="Log format: 'console' or 'json'",
    ),
) -> None:
    """Judge one task output; exits 0 when every gate passed, 1 otherwise."""
    _configure_structlog(log_format=log_format)

    loader = YamlConfigLoader(observer=StructlogConfigObserver())
    try:
        config = loader.load(path=config_path)
    except JudgeGateError as exc:
        typer.echo(str(exc))
        raise typer.Exit(code=1) from exc

    try:
        output = output_file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        typer.echo(f"Failed to read output file: {exc}")
        raise typer.Exit(code=1) from exc

    gates: list[Gate] = []
    if response_check:
        gates.append(ResponseValidationGate())
    gates.append(create_judge_gate(config=config, observer=StructlogGateObserver()))

    task = Task(title=title, description=description)
    results = asyncio.run(run_gates(gates=gates, task=task, output=output))

    for result in results:
        typer.echo(result.model_dump_json())
    typer.echo(summarize_gates(results), err=True)

    if not all_gates_passed(results):
        raise typer.Exit(code=1)

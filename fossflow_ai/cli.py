"""CLI interface."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer

from fossflow_ai.diagram.icon_catalog import format_icon_reference
from fossflow_ai.diagram.summary import generate_diagram_summary
from fossflow_ai.models.ai_config import AIServiceConfig, config_from_preset
from fossflow_ai.services.ai_config_service import load_ai_config, save_ai_config
from fossflow_ai.services.diagram_service import apply_json, format_diagram_json, generate_diagram
from fossflow_ai.tools.response_parser import InvalidDiagramJSONError, parse_diagram_json
from fossflow_ai.tools.schema_validator import CompactSchemaError, validate_compact_diagram
from fossflow_ai.utils.config import settings
from fossflow_ai.utils.file_utils import read_text_file

app = typer.Typer(add_completion=False)


def _read_input(file: Optional[Path]) -> str:
    if file is None:
        return typer.get_text_stream("stdin").read()
    if not file.exists():
        raise typer.BadParameter(f"File not found: {file}")
    return read_text_file(str(file))


def _write_output(payload: dict, output: Optional[Path]) -> None:
    text = json.dumps(payload, indent=2, ensure_ascii=False)
    if output is None:
        typer.echo(text)
    else:
        output.write_text(text, encoding="utf-8")
        typer.echo(f"Wrote {output}")


@app.command()
def generate(
    prompt: str = typer.Argument(..., help="Natural-language description of the architecture."),
    locale: Optional[str] = typer.Option(None, "--locale", "-l", help="Language for titles and names."),
    provider: Optional[str] = typer.Option(None, "--provider", help="Preset: openai, deepseek, ollama."),
    api_key: Optional[str] = typer.Option(None, "--api-key", envvar="AI_API_KEY", show_default=False),
    output: Optional[Path] = typer.Option(None, "--output", "-o"),
    save_config: bool = typer.Option(False, "--save-config", help="Persist the provider settings used."),
):
    """Generate a diagram with the configured AI provider."""
    if provider:
        try:
            config = config_from_preset(provider, api_key or "")
        except ValueError as exc:
            raise typer.BadParameter(str(exc))
    else:
        config = load_ai_config()
        if config is None:
            raise typer.BadParameter("No AI provider configured; pass --provider or set AI_API_ENDPOINT/AI_API_KEY/AI_MODEL")
        if api_key:
            config = config.model_copy(update={"api_key": api_key})

    try:
        result = generate_diagram(prompt, config, locale=locale)
    except (ValueError, RuntimeError) as exc:
        typer.echo(f"Generation failed: {exc}", err=True)
        raise typer.Exit(code=1)

    if save_config:
        save_ai_config(config)
    typer.echo(result.summary, err=True)
    _write_output(result.diagram.to_compact(), output)


@app.command()
def normalize(
    file: Optional[Path] = typer.Argument(None, help="Diagram JSON file (reads stdin when omitted)."),
    output: Optional[Path] = typer.Option(None, "--output", "-o"),
):
    """Repair a hand-edited diagram JSON into canonical form."""
    try:
        diagram = apply_json(_read_input(file))
    except InvalidDiagramJSONError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1)
    _write_output(diagram.to_compact(), output)


@app.command()
def validate(file: Optional[Path] = typer.Argument(None, help="Diagram JSON file (reads stdin when omitted).")):
    """Strictly check a diagram JSON as if it came from the model."""
    try:
        validate_compact_diagram(parse_diagram_json(_read_input(file)))
    except (InvalidDiagramJSONError, CompactSchemaError) as exc:
        typer.echo(f"Invalid: {exc}", err=True)
        raise typer.Exit(code=1)
    typer.echo("Valid")


@app.command()
def summary(file: Optional[Path] = typer.Argument(None, help="Diagram JSON file (reads stdin when omitted).")):
    """Print a short preview of a diagram."""
    try:
        data = parse_diagram_json(_read_input(file))
    except InvalidDiagramJSONError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1)
    typer.echo(generate_diagram_summary(data))


@app.command("format")
def format_json(
    file: Optional[Path] = typer.Argument(None, help="Diagram JSON file (reads stdin when omitted)."),
    output: Optional[Path] = typer.Option(None, "--output", "-o"),
):
    """Pretty-print diagram JSON without changing its content."""
    try:
        text = format_diagram_json(_read_input(file))
    except InvalidDiagramJSONError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1)
    if output is None:
        typer.echo(text)
    else:
        output.write_text(text, encoding="utf-8")
        typer.echo(f"Wrote {output}")


@app.command()
def icons():
    """List the built-in icon ids."""
    typer.echo(format_icon_reference())


@app.command()
def configure(
    provider: Optional[str] = typer.Option(None, "--provider", help="Preset name; defaults to AI_PROVIDER, then openai."),
    api_key: str = typer.Option(..., "--api-key", prompt=True, hide_input=True),
    endpoint: Optional[str] = typer.Option(None, "--endpoint"),
    model: Optional[str] = typer.Option(None, "--model"),
    temperature: Optional[float] = typer.Option(None, "--temperature", min=0.0, max=2.0),
    max_tokens: Optional[int] = typer.Option(None, "--max-tokens", min=1),
):
    """Save AI provider settings for later runs."""
    provider = provider or settings.ai_provider or "openai"
    try:
        config = config_from_preset(provider, api_key)
    except ValueError as exc:
        raise typer.BadParameter(str(exc))
    updates = {
        "api_endpoint": endpoint,
        "model": model,
        "temperature": temperature,
        "max_tokens": max_tokens,
    }
    config = AIServiceConfig(**{**config.model_dump(), **{k: v for k, v in updates.items() if v is not None}})
    if not config.api_endpoint or not config.model:
        raise typer.BadParameter("Custom providers need --endpoint and --model")
    path = save_ai_config(config)
    typer.echo(f"Saved AI config to {path}")


if __name__ == "__main__":
    app()

from __future__ import annotations

from pathlib import Path

import typer

app = typer.Typer(name="fluentcheck", help="Inspect fluentcheck field naming and config")


@app.command()
def normalize(
    names: list[str] = typer.Argument(help="Raw attribute names to normalize"),
    config: str | None = typer.Option(None, help="Path to fluentcheck YAML config"),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug output to terminal"
    ),
    debug_log: str | None = typer.Option(None, help="Also write debug output to this file"),
):
    """Show the source name and kind each raw attribute name maps to."""
    from fluentcheck.config import FluentCheckConfig, load_config
    from fluentcheck.verbose import setup_logger

    logger = setup_logger(
        Path(debug_log) if debug_log else None, verbose=verbose
    )

    if config is not None:
        config_path = Path(config)
        if not config_path.exists():
            typer.echo(f"Error: config file not found: {config}", err=True)
            raise typer.Exit(1)
        try:
            fluent_config = load_config(config_path)
        except ValueError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(1)
    else:
        fluent_config = FluentCheckConfig()

    normalizer = fluent_config.build_normalizer()
    logger.debug(f"Normalizing {len(names)} name(s) with {len(normalizer.rules)} rule(s)")

    for name in names:
        source_name, kind = normalizer.normalize(name)
        typer.echo(f"{name} -> {source_name} ({kind.value})")


@app.command()
def schema(
    out: str = typer.Option(
        "fluentcheck.schema.json", help="Output path for the config JSON Schema"
    ),
):
    """Write the JSON Schema of the fluentcheck YAML config."""
    from fluentcheck.schema import write_json_schema

    out_path = Path(out)
    write_json_schema(out_path)
    typer.echo(f"Wrote schema: {out_path}")

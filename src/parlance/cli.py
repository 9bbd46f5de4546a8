from typing import Optional

import typer

from . import default_engine
from .engine.audit import find_ambiguities
from .logging import enable_console_logging, get_logger

app = typer.Typer(help="parlance – natural-language assertion registry tools", no_args_is_help=True)

logger = get_logger(__name__)


@app.command("list")
def list_assertions(
    asynchronous: bool = typer.Option(False, "--async", help="List asynchronous assertions instead of synchronous ones"),
    phrase: Optional[str] = typer.Option(None, "--phrase", "-p", help="Only assertions accepting this phrase"),
) -> None:
    """
    List registered assertions with their ids and signatures.
    """
    registry = default_engine.registry
    assertion_set = registry.asynchronous if asynchronous else registry.sync

    shown = 0
    for definition in assertion_set:
        if phrase is not None and phrase not in definition.phrases:
            continue
        typer.echo(f"{definition.id}\n    {definition}")
        shown += 1

    if shown == 0:
        typer.echo(f"No assertions accept phrase {phrase!r}" if phrase else "No assertions registered")
        raise typer.Exit(code=1)

    kind = "async" if asynchronous else "sync"
    typer.echo(f"{shown} {kind} assertion(s)")


@app.command()
def audit() -> None:
    """
    Check the built-in assertions for calls that more than one assertion matches exactly.
    """
    registry = default_engine.registry
    total = 0
    for label, assertion_set in (("sync", registry.sync), ("async", registry.asynchronous)):
        ambiguities = find_ambiguities(assertion_set)
        logger.info(f"Audited {len(assertion_set)} {label} assertions: {len(ambiguities)} ambiguities")
        for ambiguity in ambiguities:
            typer.echo(f"AMBIGUOUS {ambiguity.args!r}")
            for assertion_id in ambiguity.assertion_ids:
                typer.echo(f"    {assertion_id}")
        total += len(ambiguities)

    if total:
        raise typer.Exit(code=1)
    typer.echo("No ambiguous signatures found")


def main() -> None:
    enable_console_logging()
    app()


if __name__ == "__main__":
    main()

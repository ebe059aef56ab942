"""nimbra-connect CLI — Typer-based entry point.

Commands
--------
connect     Run a connect script against a host snapshot.
connectors  List registered connectors.
audit       Show or verify the connect journal.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

app = typer.Typer(
    name="nimbra-connect",
    help="Connect a named input to a named output on an edge element.",
    add_completion=False,
)


def _setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s  %(name)-30s  %(levelname)-7s  %(message)s",
    )


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


@app.command()
def connect(
    snapshot: Path = typer.Option(..., "--snapshot", exists=True, dir_okay=False, help="Host snapshot (JSON)."),
    input_name: str = typer.Option(..., "--input", "-i", help="Input name, bare or bracket-wrapped."),
    output_name: str = typer.Option(..., "--output", "-o", help="Output name, bare or bracket-wrapped."),
    element: Optional[str] = typer.Option(None, "--element", "-e", help="Target element name."),
    connector: str = typer.Option("connect_input", "--connector", help="Connector to run."),
    policy: Optional[str] = typer.Option(None, "--policy", help="Failure policy: raise, abort, log."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Run a connect script against an in-memory host built from a snapshot."""
    _setup_logging(verbose)
    from pydantic import ValidationError

    from nimbra_connect.connectors.registry import run_connector
    from nimbra_connect.core.errors import ConnectError
    from nimbra_connect.core.types import ConnectRequest
    from nimbra_connect.host.base import ScriptAbortedError
    from nimbra_connect.host.memory import InMemoryHost

    if policy is not None and policy not in ("raise", "abort", "log"):
        typer.echo(f"Unknown policy: {policy}")
        raise typer.Exit(2)

    try:
        host = InMemoryHost.from_file(snapshot)
    except (ValueError, ValidationError) as exc:
        typer.echo(f"Invalid snapshot: {exc}")
        raise typer.Exit(2)
    request = ConnectRequest(input_name=input_name, output_name=output_name, element_name=element)

    try:
        result = run_connector(connector, host, request, policy=policy)  # type: ignore[arg-type]
    except ConnectError as exc:
        typer.echo(f"Connect failed: {exc}")
        raise typer.Exit(1)
    except ScriptAbortedError as exc:
        typer.echo(f"Script aborted: {exc.message}")
        raise typer.Exit(1)

    for line in host.messages:
        typer.echo(f"  info: {line}")
    if not result.success:
        raise typer.Exit(1)
    for write in host.writes:
        values = ", ".join(str(v) for v in write.values)
        typer.echo(f"Wrote {write.element}/{write.param_id}: ({values})")


@app.command()
def connectors() -> None:
    """List all registered connectors and their availability."""
    _setup_logging()
    from nimbra_connect.connectors.registry import get_registry
    from nimbra_connect.host.memory import InMemoryHost

    reg = get_registry()
    if not reg:
        typer.echo("No connectors found.")
        return

    host = InMemoryHost()
    for name, cls in sorted(reg.items()):
        instance = cls(host)
        avail = "✓" if instance.is_available() else "✗"
        element = "param" if cls.takes_element_param else "bound"
        typer.echo(f"  [{avail}] {name:22s}  element={element:6s}  {cls.description[:60]}")


@app.command()
def audit(
    verify: bool = typer.Option(False, "--verify", help="Check the journal's digest chain."),
    last: int = typer.Option(10, "--last", "-n", help="Show the last N connects."),
    failed: bool = typer.Option(False, "--failed", help="Only show failed connects."),
) -> None:
    """Show the connect journal."""
    _setup_logging()
    from nimbra_connect.config.settings import get_settings
    from nimbra_connect.security.audit import ConnectJournal

    journal = ConnectJournal.for_settings(get_settings())

    if verify:
        intact, checked = journal.verify()
        typer.echo(f"{journal.path}: {'intact' if intact else 'BROKEN'}, {checked} record(s) checked")
        if not intact:
            raise typer.Exit(1)
        return

    records = [r for r in journal.records() if not failed or r.outcome == "failed"][-last:]
    if not records:
        typer.echo("No connects recorded.")
        return
    for r in records:
        line = f"{r.timestamp}  {r.outcome:9s}  {r.element}: {r.input_name} -> {r.output_name}"
        if r.error:
            line += f"  ({r.error})"
        typer.echo(line)


def main() -> int:
    """Entry point for the console script."""
    app()
    return 0

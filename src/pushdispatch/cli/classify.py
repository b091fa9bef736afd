"""CLI: pushdispatch classify"""

import json

import click
from rich.console import Console
from rich.table import Table

from pushdispatch.classifier import classify

console = Console()


@click.command("classify")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option("--json-output", "--json", is_flag=True)
def classify_cmd(path: str, json_output: bool):
    """Show which lane handles each envelope in a JSON-lines file."""
    from pathlib import Path
    from pushdispatch.cli.main import _read_envelopes

    rows = []
    for lineno, envelope in _read_envelopes(Path(path)):
        if envelope is None:
            rows.append({"line": lineno, "signature": None, "category": "invalid"})
            continue
        category = classify(envelope)
        rows.append({
            "line": lineno,
            "signature": envelope.signature,
            "category": category.value if category else "dropped",
        })

    if json_output:
        for row in rows:
            click.echo(json.dumps(row))
        return

    table = Table(title=f"Envelopes ({len(rows)} total)")
    table.add_column("Line", justify="right")
    table.add_column("Signature", style="bold")
    table.add_column("Category")
    for row in rows:
        style = "red" if row["category"] in ("invalid", "dropped") else "green"
        table.add_row(str(row["line"]), "-" if row["signature"] is None else str(row["signature"]), f"[{style}]{row['category']}[/{style}]")
    console.print(table)

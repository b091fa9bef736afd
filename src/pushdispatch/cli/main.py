"""
pushdispatch CLI - `pushdispatch` command.

Commands:
  pushdispatch classify <file>   Show which lane handles each envelope
  pushdispatch replay <file>     Dispatch envelopes and print rendered alerts
"""

import asyncio
import json
from pathlib import Path
from typing import Iterator, Optional

try:
    import click
    from rich.console import Console
    from rich.markup import escape
except ImportError:
    raise SystemExit("CLI requires extras: pip install pushdispatch[cli]")

from pushdispatch.config import Config, load_config
from pushdispatch.errors import ConfigError
from pushdispatch.models.envelope import PushNotificationEnvelope
from pushdispatch.transport.envelope import parse_envelope

console = Console()


def _read_envelopes(path: Path) -> Iterator[tuple[int, Optional[PushNotificationEnvelope]]]:
    """Yield (line number, envelope or None) for each non-blank JSON line."""
    for lineno, line in enumerate(path.read_text().splitlines(), start=1):
        if not line.strip():
            continue
        try:
            raw = json.loads(line)
        except json.JSONDecodeError:
            yield lineno, None
            continue
        yield lineno, parse_envelope(raw)


def _get_config(config_path: Optional[str]) -> Config:
    try:
        return load_config(config_path)
    except ConfigError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise SystemExit(1)


def _run(coro):
    return asyncio.run(coro)


@click.group()
@click.version_option("0.1.0")
@click.option("--config", "config_path", default=None, type=click.Path(dir_okay=False),
              help="Config file (default ~/.pushdispatch/config.json)")
@click.pass_context
def main(ctx: click.Context, config_path: Optional[str]):
    """Push notification dispatcher tools."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path


# Register subcommands from separate modules
from pushdispatch.cli.classify import classify_cmd
from pushdispatch.cli.replay import replay_cmd

main.add_command(classify_cmd)
main.add_command(replay_cmd)


if __name__ == "__main__":
    main()

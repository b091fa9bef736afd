"""CLI: pushdispatch replay"""

from pathlib import Path

import click
from rich.console import Console
from rich.panel import Panel

from pushdispatch.dispatcher import AsyncPushNotifications
from pushdispatch.models.alert import AlertDescription
from pushdispatch.sink import NotificationTray

console = Console()


class ConsoleTray(NotificationTray):
    """Tray that also prints every alert as it is posted."""

    def notify(self, signature: int, alert: AlertDescription) -> None:
        super().notify(signature, alert)
        lines = [alert.body]
        if alert.large_icon is not None:
            masks = ", ".join(m.value for m in alert.large_icon.transforms)
            lines.append(f"[dim]icon: {alert.large_icon.url} ({len(alert.large_icon.data)} bytes; {masks})[/dim]")
        elif alert.large_image is not None:
            lines.append(f"[dim]icon unavailable: {alert.large_image.url}[/dim]")
        if alert.tap_target is not None:
            hops = " -> ".join(
                f"{hop.screen.value}({hop.params.get('project_param') or hop.params.get('url')})"
                for hop in alert.tap_target.hops
            )
            lines.append(f"[cyan]tap: {hops}[/cyan]")
        console.print(Panel("\n".join(lines), title=f"[bold]{alert.title}[/bold]", subtitle=f"#{signature}"))


@click.command("replay")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def replay_cmd(ctx: click.Context, path: str):
    """Dispatch envelopes from a JSON-lines file and print the rendered alerts."""
    from pushdispatch.cli.main import _get_config, _read_envelopes, _run

    config = _get_config((ctx.obj or {}).get("config_path"))
    tray = ConsoleTray()

    async def _replay():
        bus = AsyncPushNotifications.from_config(config, tray)
        await bus.initialize()
        skipped = 0
        try:
            for lineno, envelope in _read_envelopes(Path(path)):
                if envelope is None:
                    console.print(f"[yellow]line {lineno}: invalid envelope, skipped[/yellow]")
                    skipped += 1
                    continue
                bus.submit(envelope)
            with console.status("Dispatching..."):
                await bus.flush()
        finally:
            await bus.shutdown()
        console.print(f"[green]{len(tray.history)} alert(s) rendered[/green], {skipped} invalid line(s)")

    _run(_replay())

"""Rendering of a resolution pass for the terminal."""

import logging
from typing import List, Optional, Tuple

from rich.console import Console
from rich.table import Table

from plugspec.component import Component
from plugspec.runtime import Resolution
from plugspec.spec.registry import Notification

LEVEL_STYLES = {
    logging.ERROR: "bold red",
    logging.WARNING: "yellow",
    logging.INFO: "cyan",
}


def _action(component: Component) -> str:
    if component.state.is_local:
        return "local"
    if component.state.installed:
        return "keep"
    return "install"


def plan_rows(resolution: Resolution) -> List[Tuple[str, str, str, str]]:
    """Return ``(name, action, lazy, dir)`` rows: enabled, disabled, then clean.

    Each group is sorted by name.
    """
    rows = []
    for name, component in sorted(resolution.plugins.items()):
        lazy = "lazy" if component.lazy else "start"
        rows.append((name, _action(component), lazy, component.dir or "-"))
    for name, component in sorted(resolution.registry.disabled.items()):
        rows.append((name, "disabled", "-", component.dir or "-"))
    for component in resolution.to_clean:
        action = "clean (link)" if component.state.is_symlink else "clean"
        rows.append((component.name or "-", action, "-", component.dir or "-"))
    return rows


def render_plan(resolution: Resolution, console: Optional[Console] = None) -> None:
    """Print the install delta as a table."""
    console = console or Console()
    rows = plan_rows(resolution)
    if not rows:
        console.print("No components declared or installed.")
        return

    table = Table(title=f"Components ({len(resolution.plugins)} enabled)")
    table.add_column("Name", style="cyan")
    table.add_column("Action", style="green")
    table.add_column("Load", style="dim")
    table.add_column("Directory", style="dim", overflow="fold")
    for row in rows:
        table.add_row(*row)
    console.print(table)


def render_notifications(
    notifications: List[Notification], console: Optional[Console] = None
) -> None:
    console = console or Console()
    for notif in notifications:
        style = LEVEL_STYLES.get(notif.level, "")
        label = logging.getLevelName(notif.level)
        origin = f" [{notif.file}]" if notif.file else ""
        console.print(f"{label}{origin}: {notif.msg}", style=style, markup=False)

from __future__ import annotations

import click
from rich.table import Table
from rich.text import Text

from aiscan.cli.main import aiscan
from aiscan.core.scanner import count_matches
from aiscan.output.renderer import console, render_catalog


@aiscan.group()
def patterns() -> None:
    """Inspect the compiled pattern catalog."""
    pass


@patterns.command("list")
@click.option("--sources", is_flag=True, default=False, help="Show each pattern's regex")
@click.pass_context
def list_patterns(ctx: click.Context, sources: bool) -> None:
    """List weight classes and their pattern counts."""
    render_catalog(ctx.obj["catalog"], show_sources=sources)


@patterns.command("test")
@click.argument("text")
@click.pass_context
def test_patterns(ctx: click.Context, text: str) -> None:
    """Show which patterns match TEXT, without windowing or scoring."""
    catalog = ctx.obj["catalog"]

    table = Table(show_header=True, header_style="bold dim", padding=(0, 1))
    table.add_column("Weight", justify="right", width=7)
    table.add_column("Matches", justify="right", width=8)
    table.add_column("Pattern")

    hits = 0
    for pattern_class in catalog:
        for pattern in pattern_class.patterns:
            matches = count_matches(pattern, text)
            if matches:
                hits += matches
                style = "green" if pattern_class.weight < 0 else "red"
                table.add_row(Text(str(pattern_class.weight), style=style), str(matches), Text(pattern.pattern))

    if not hits:
        console.print("[dim]No patterns matched.[/dim]")
        return
    console.print(table)

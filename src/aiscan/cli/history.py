from __future__ import annotations

import json
import os

import click

from aiscan.cli.main import aiscan
from aiscan.core.allowlist import domain_of
from aiscan.output.renderer import console, render_history


@aiscan.command()
@click.argument("domain")
@click.option("--db", "db_path", default="aiscan.db", show_default=True)
@click.option("--limit", default=20, show_default=True, help="Max results to show")
@click.pass_context
def history(ctx: click.Context, domain: str, db_path: str, limit: int) -> None:
    """Show stored results for DOMAIN ('local' for files and stdin), newest first."""
    from aiscan.db.database import get_connection
    from aiscan.db.queries import LOCAL_DOMAIN, get_domain_history

    if not os.path.exists(db_path):
        console.print(f"[yellow]No database found at {db_path}. Run analyze --save first.[/yellow]")
        return

    key = domain if domain == LOCAL_DOMAIN else domain_of(domain)
    conn = get_connection(db_path)
    rows = get_domain_history(conn, key, limit=limit)
    conn.close()

    if ctx.obj["output"] == "json":
        click.echo(json.dumps(rows, indent=2, default=str))
    else:
        render_history(key, rows)

from __future__ import annotations

import click

from aiscan.cli.analyze import _engine_config, _load_target, engine_options
from aiscan.cli.main import aiscan
from aiscan.core.fetcher import FetchError
from aiscan.errors import InvalidInputError
from aiscan.output.formatters import to_json_list
from aiscan.output.renderer import console, render_comparison_table, render_result


@aiscan.command()
@click.argument("targets", nargs=-1, required=True)
@engine_options
@click.option(
    "--sort",
    type=click.Choice(["score", "source"]),
    default="score",
    show_default=True,
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    default=False,
    help="Show per-target breakdowns",
)
@click.pass_context
def compare(
    ctx: click.Context,
    targets: tuple[str, ...],
    chunk_size: int | None,
    scale: float | None,
    profile: str | None,
    linguistic: str | None,
    sort: str,
    verbose: bool,
) -> None:
    """Score several URLs/files and rank them, most machine-like first."""
    if len(targets) < 2:
        raise click.UsageError("Provide at least 2 targets to compare.")

    analyzer = ctx.obj["analyzer"]
    allowlist = ctx.obj["allowlist"]
    output_format = ctx.obj["output"]
    engine = _engine_config(ctx.obj["config"], chunk_size, scale, profile, linguistic)

    results = []
    for target in targets:
        if target.startswith(("http://", "https://")) and allowlist.should_skip(target):
            console.print(f"[dim]Skipping {target}: on the allow-list.[/dim]")
            continue
        try:
            article, url, file_path = _load_target(target)
            results.append(
                analyzer.run(article.corpus, engine, url=url, file_path=file_path, title=article.title)
            )
        except (FetchError, InvalidInputError) as e:
            console.print(f"[yellow]Skipping {target}: {e}[/yellow]")

    if not results:
        console.print("[red]No results to compare.[/red]")
        raise SystemExit(1)

    if sort == "score":
        results = sorted(results, key=lambda r: r.score, reverse=True)
    else:
        results = sorted(results, key=lambda r: r.source)

    if output_format == "json":
        click.echo(to_json_list(results))
    else:
        render_comparison_table(results)
        if verbose:
            for result in results:
                render_result(result, show_details=True)

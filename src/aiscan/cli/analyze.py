from __future__ import annotations

from pathlib import Path

import click

from aiscan.cli.main import aiscan
from aiscan.core.fetcher import Article, FetchError, fetch_url, read_file
from aiscan.core.scorer import is_likely_ai
from aiscan.errors import InvalidInputError
from aiscan.models.config import LINGUISTIC_MODES, AppConfig, EngineConfig
from aiscan.output.formatters import to_json
from aiscan.output.renderer import console, render_alert, render_error, render_result


def _load_target(target: str) -> tuple[Article, str | None, str | None]:
    """Return (article, url, file_path) for a URL, a local file, or '-' for stdin."""
    if target == "-":
        text = click.get_text_stream("stdin").read()
        return Article(text_content=text), None, None
    if target.startswith(("http://", "https://")):
        return fetch_url(target), target, None
    return read_file(Path(target)), None, target


def _engine_config(
    config: AppConfig,
    chunk_size: int | None,
    scale: float | None,
    profile: str | None,
    linguistic: str | None,
) -> EngineConfig:
    if scale is None and profile is not None:
        if profile not in config.scale_profiles:
            raise click.BadParameter(
                f"Unknown profile '{profile}'. "
                f"Available: {', '.join(sorted(config.scale_profiles))}",
                param_hint="--profile",
            )
        scale = config.scale_profiles[profile]
    try:
        return config.engine.with_overrides(
            chunk_size=chunk_size, scale=scale, linguistic_mode=linguistic
        )
    except InvalidInputError as e:
        raise click.BadParameter(str(e)) from e


def engine_options(func):
    """Engine tuning options shared by analyze and compare."""
    func = click.option(
        "--linguistic",
        type=click.Choice(LINGUISTIC_MODES),
        default=None,
        help="Fold the experimental linguistic signal into the score",
    )(func)
    func = click.option(
        "--profile",
        default=None,
        help="Named scale preset, e.g. short (1.75) or article (2.25)",
    )(func)
    func = click.option(
        "--scale",
        type=float,
        default=None,
        help="Scale exponent applied to |alpha| (overrides --profile)",
    )(func)
    func = click.option(
        "--chunk-size",
        type=int,
        default=None,
        help="Window size in characters",
    )(func)
    return func


@aiscan.command()
@click.argument("target")
@engine_options
@click.option(
    "--verbose", "-v",
    is_flag=True,
    default=False,
    help="Show match map and intermediate signals",
)
@click.option(
    "--save",
    is_flag=True,
    default=False,
    help="Persist the result to the SQLite database",
)
@click.option(
    "--db",
    "db_path",
    default="aiscan.db",
    show_default=True,
    help="Path to SQLite database file (used with --save)",
)
@click.option(
    "--ignore-allowlist",
    is_flag=True,
    default=False,
    help="Scan URLs even if they are on the allow-list",
)
@click.pass_context
def analyze(
    ctx: click.Context,
    target: str,
    chunk_size: int | None,
    scale: float | None,
    profile: str | None,
    linguistic: str | None,
    verbose: bool,
    save: bool,
    db_path: str,
    ignore_allowlist: bool,
) -> None:
    """Score a URL, local file, or stdin ('-') for machine-generated text."""
    analyzer = ctx.obj["analyzer"]
    config = ctx.obj["config"]
    output_format = ctx.obj["output"]

    if (
        not ignore_allowlist
        and target.startswith(("http://", "https://"))
        and ctx.obj["allowlist"].should_skip(target)
    ):
        click.echo(f"Skipping {target}: on the allow-list.", err=True)
        return

    engine = _engine_config(config, chunk_size, scale, profile, linguistic)

    try:
        article, url, file_path = _load_target(target)
        result = analyzer.run(
            article.corpus, engine, url=url, file_path=file_path, title=article.title
        )
    except (FetchError, InvalidInputError) as e:
        render_error(str(e))
        raise SystemExit(1)

    if save:
        from aiscan.db.database import get_connection
        from aiscan.db.queries import store_result
        conn = get_connection(db_path)
        store_result(conn, result)
        conn.close()

    if output_format == "json":
        click.echo(to_json(result))
    else:
        render_result(result, show_details=verbose)
        if is_likely_ai(result.score, config.labels):
            render_alert(result)
        if save:
            console.print(f"[dim]Saved to {db_path}[/dim]")

from __future__ import annotations

from pathlib import Path

import click

from aiscan.core.allowlist import AllowList
from aiscan.core.analyzer import Analyzer
from aiscan.errors import ConfigError
from aiscan.logging import setup_logging
from aiscan.output.renderer import render_error
from aiscan.patterns.catalog import compile_catalog
from aiscan.patterns.loader import load_app_config, load_pattern_config

# Default patterns directory shipped inside the package
_DEFAULT_PATTERNS_DIR = Path(__file__).parent.parent / "data"


def _resolve_patterns_dir(override: str | None) -> Path:
    if override:
        p = Path(override)
        if not p.is_dir():
            raise click.BadParameter(f"Patterns directory does not exist: {p}")
        return p

    if _DEFAULT_PATTERNS_DIR.is_dir():
        return _DEFAULT_PATTERNS_DIR

    raise click.UsageError(
        "Could not find the default patterns directory. "
        "Use --patterns-dir to specify its location."
    )


@click.group()
@click.option(
    "--patterns-dir",
    default=None,
    envvar="AISCAN_PATTERNS_DIR",
    help="Directory holding patterns.yaml and _engine.yaml (default: bundled)",
)
@click.option(
    "--output",
    type=click.Choice(["terminal", "json"]),
    default="terminal",
    show_default=True,
    help="Output format",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    envvar="AISCAN_LOG_LEVEL",
    help="Logging level for diagnostics on stderr [default: WARNING]",
)
@click.pass_context
def aiscan(ctx: click.Context, patterns_dir: str | None, output: str, log_level: str | None) -> None:
    """aiscan — estimate how likely a text is machine-generated."""
    ctx.ensure_object(dict)
    setup_logging(log_level)

    resolved = _resolve_patterns_dir(patterns_dir)
    try:
        config = load_app_config(resolved)
        catalog = compile_catalog(load_pattern_config(resolved))
    except ConfigError as e:
        render_error(str(e))
        raise SystemExit(1)

    ctx.obj["config"] = config
    ctx.obj["catalog"] = catalog
    ctx.obj["analyzer"] = Analyzer(catalog, config.engine, config.labels)
    ctx.obj["allowlist"] = AllowList(config.allowlist)
    ctx.obj["patterns_dir"] = resolved
    ctx.obj["output"] = output


# Import subcommands so click can register them
from aiscan.cli import analyze, compare, history, patterns  # noqa: E402, F401

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from aiscan.models.pattern import PatternCatalog
from aiscan.models.result import ClassificationResult

console = Console()

_LABEL_COLORS = {
    "LIKELY AI": "bold red",
    "UNCERTAIN": "bold yellow",
    "LIKELY HUMAN": "bold green",
}


def _bar(score: float, width: int = 20) -> str:
    filled = round(score * width)
    return "█" * filled + "░" * (width - filled)


def _weight_style(weight: int) -> str:
    if weight < 0:
        return "green"
    return "red" if weight >= 3 else "yellow"


def render_result(result: ClassificationResult, show_details: bool = False) -> None:
    """Print the score and its diagnostics to terminal using Rich."""
    label_style = _LABEL_COLORS.get(result.label, "white")

    console.print()
    console.print(f"[bold]Source:[/bold] {result.source}")
    if result.title:
        console.print(f"[bold]Title:[/bold]  {result.title}")
    console.print(f"[bold]Words:[/bold]  {result.word_count:,}  [dim]({result.corpus_length:,} chars, {result.window_count} windows)[/dim]")
    console.print()

    score_text = Text(f"  {_bar(result.score)}  {result.score:.1%}  [{result.label}]  ")
    score_text.stylize(label_style)
    console.print(Panel(score_text, expand=False))

    if result.clamped:
        console.print(
            f"[yellow]Raw score {result.raw_score!r} was outside [0, 1) and has been clamped.[/yellow]"
        )

    if not show_details:
        return

    console.print()
    table = Table(show_header=True, header_style="bold dim", box=None, padding=(0, 1))
    table.add_column("Signal", style="dim", width=18)
    table.add_column("Value", justify="right")
    table.add_row("pattern score", f"{result.pattern_score:g}")
    table.add_row("alpha", f"{result.alpha:.4f}")
    table.add_row("scale", f"{result.scale:g}")
    table.add_row("chunk size", str(result.chunk_size))
    if result.linguistic:
        ling = result.linguistic
        table.add_row("linguistic mode", result.linguistic_mode)
        table.add_row("linguistic score", f"{ling.score:.4f}")
        table.add_row("type-token ratio", f"{ling.lexical_diversity:.3f}")
        table.add_row("burstiness (CV)", f"{ling.burstiness:.3f}")
    console.print(table)

    if result.match_map:
        console.print()
        console.print("[bold dim]Matches by weight class:[/bold dim]")
        mtable = Table(show_header=True, header_style="bold dim", box=None, padding=(0, 1))
        mtable.add_column("Weight", justify="right", width=7)
        mtable.add_column("Matches", justify="right", width=8)
        mtable.add_column("Contribution", justify="right", width=12)
        for weight, count in sorted(result.match_map.items(), reverse=True):
            style = _weight_style(weight)
            mtable.add_row(
                Text(str(weight), style=style),
                str(count),
                Text(str(weight * count), style=style),
            )
        console.print(mtable)


def render_comparison_table(results: list[ClassificationResult]) -> None:
    """Render a ranked comparison table for multiple targets."""
    console.print()
    table = Table(show_header=True, header_style="bold dim", padding=(0, 1))
    table.add_column("#", width=3, justify="right")
    table.add_column("Score", width=7, justify="right")
    table.add_column("Label", width=14)
    table.add_column("Words", width=8, justify="right")
    table.add_column("Source")

    for i, result in enumerate(results, 1):
        label_style = _LABEL_COLORS.get(result.label, "white")
        source = result.source
        # Truncate long URLs
        if len(source) > 60:
            source = source[:57] + "..."
        table.add_row(
            str(i),
            Text(f"{result.score:.1%}", style=label_style),
            Text(result.label, style=label_style),
            f"{result.word_count:,}",
            source,
        )

    console.print(table)


def render_catalog(catalog: PatternCatalog, show_sources: bool = False) -> None:
    table = Table(show_header=True, header_style="bold dim", padding=(0, 1))
    table.add_column("Weight", justify="right", width=7)
    table.add_column("Patterns", justify="right", width=9)
    if show_sources:
        table.add_column("Sources")

    for pattern_class in sorted(catalog, key=lambda c: c.weight, reverse=True):
        row = [
            Text(str(pattern_class.weight), style=_weight_style(pattern_class.weight)),
            str(len(pattern_class.patterns)),
        ]
        if show_sources:
            row.append(Text("\n".join(pattern_class.sources)))
        table.add_row(*row)

    console.print(table)
    console.print(
        f"\n[dim]{catalog.pattern_count} patterns in {len(catalog)} weight classes[/dim]"
    )


def render_history(domain: str, rows: list[dict]) -> None:
    if not rows:
        console.print(f"[yellow]No stored results for {domain}.[/yellow]")
        return

    table = Table(show_header=True, header_style="bold dim", padding=(0, 1))
    table.add_column("Scanned", width=20)
    table.add_column("Score", justify="right", width=7)
    table.add_column("Label", width=14)
    table.add_column("Source")

    for row in rows:
        label_style = _LABEL_COLORS.get(row["label"], "white")
        score = Text(f"{row['score']:.1%}", style=label_style)
        if row["clamped"]:
            score.append("*", style="yellow")
        table.add_row(
            row["scanned_at"][:19].replace("T", " "),
            score,
            Text(row["label"] or "", style=label_style),
            row["url"] or row["file_path"] or "stdin",
        )

    console.print(f"\n[bold]History:[/bold] {domain}")
    console.print(table)


def render_alert(result: ClassificationResult) -> None:
    console.print(
        f"[bold red]This page may contain a considerable amount of AI-generated text.[/bold red] "
        f"Normalized score: {result.score:.2%}"
    )


def render_error(message: str) -> None:
    console.print(f"[bold red]Error:[/bold red] {escape(message)}")

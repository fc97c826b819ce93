# blog_search/interface/cli.py

from typing import List, Optional, Sequence
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Prompt
from rich import box
from rich.text import Text

from blog_search.domain.highlight import format_date, highlight_spans, primary_category, visible_tags
from blog_search.domain.interfaces import ResultSurfacePort
from blog_search.domain.models import Document, NO_SELECTION


console = Console()

HELP_TEXT = (
    "[dim]Type at least 2 characters to search. Commands: "
    "/down /up /enter /copy /esc /k (open) /quit[/dim]"
)


def display_welcome_banner() -> None:
    console.print(Panel.fit(
        "[bold cyan]🔍 Blog Search[/bold cyan]\n"
        "[dim]Scored title, tag, category, excerpt and content matching[/dim]",
        box=box.DOUBLE,
        border_style="cyan",
    ))


def display_index_status(num_documents: int, enabled: bool) -> None:
    if enabled:
        console.print(f"\n[green]✓[/green] Index loaded — [bold]{num_documents}[/bold] posts ready for search.\n")
    else:
        console.print("\n[yellow]![/yellow] [dim]Search index unavailable — queries will return nothing.[/dim]\n")
    console.print(HELP_TEXT)


def prompt_for_input() -> str:
    return Prompt.ask("\n[bold yellow]🔎 Search[/bold yellow]", default="", show_default=False)


def display_error(message: str) -> None:
    console.print(f"\n[bold red]✗ Error:[/bold red] {message}\n")


def display_notice(message: str) -> None:
    console.print(f"[dim]{message}[/dim]")


def highlight_text(text: str, query: str) -> Text:
    rendered = Text()
    for segment, is_match in highlight_spans(text, query):
        rendered.append(segment, style="bold black on yellow" if is_match else None)
    return rendered


class RichResultSurface(ResultSurfacePort):
    """
    Terminal rendition of the search overlay.

    Keeps the last rendered results so a selection change can redraw
    the whole list with the new marker.
    """

    def __init__(self, output: Optional[Console] = None):
        self._console = output or console
        self._results: List[Document] = []
        self._query = ""
        self._selected_index = NO_SELECTION
        self._is_visible = False

    def show(self) -> None:
        self._is_visible = True
        self._console.print("[cyan]Search opened.[/cyan]")

    def hide(self) -> None:
        self._is_visible = False
        self._console.print("[cyan]Search closed.[/cyan]")

    def render(self, results: Sequence[Document], query: str) -> None:
        self._results = list(results)
        self._query = query
        self._selected_index = NO_SELECTION
        self._draw()

    def clear(self) -> None:
        self._results = []
        self._query = ""
        self._selected_index = NO_SELECTION

    def set_empty_visible(self, visible: bool) -> None:
        if visible:
            self._console.print("\n[dim]No posts found.[/dim]")

    def select(self, index: int) -> None:
        self._selected_index = index
        if self._results:
            self._draw()

    # ─── Private ──────────────────────────────────────────────────────────────

    def _draw(self) -> None:
        self._console.print(f"\n[bold]Results for:[/bold] [italic]\"{self._query}\"[/italic]\n")

        for rank, document in enumerate(self._results, start=1):
            is_selected = (rank - 1) == self._selected_index

            panel_content = Text()
            panel_content.append_text(highlight_text(document.title, self._query))
            panel_content.append("\n")

            meta = [format_date(document.date)]
            category = primary_category(document)
            if category:
                meta.append(f"📁 {category}")
            tags = visible_tags(document)
            if tags:
                meta.append(" ".join(f"#{tag}" for tag in tags))
            panel_content.append(" · ".join(part for part in meta if part), style="dim")

            if document.excerpt:
                panel_content.append("\n\n")
                panel_content.append_text(highlight_text(document.excerpt, self._query))

            self._console.print(Panel(
                panel_content,
                title=f"[bold]{'▶ ' if is_selected else ''}#{rank}[/bold]",
                subtitle=f"[dim]{document.url}[/dim]",
                border_style="green" if is_selected else "blue",
                box=box.HEAVY if is_selected else box.ROUNDED,
                padding=(0, 2),
            ))

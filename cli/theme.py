"""Rich theme and rendering helpers shared by the bookdraft commands."""

from typing import Mapping, Sequence

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.rule import Rule
from rich.table import Table
from rich.theme import Theme
from rich.tree import Tree

from models.chapter import ChapterOutline, SavedChapter, WrittenChapterContent
from prompts.labels import chapter_title_text

BOOKDRAFT_THEME = Theme({
    "success": "green",
    "warning": "yellow",
    "error": "bold red",
    "muted": "dim",
    "label": "dim",
    "value": "bold",
    "chapter": "cyan",
})

_INTENT_PREVIEW = 60


def get_console() -> Console:
    return Console(theme=BOOKDRAFT_THEME)


def app_header(title: str = "bookdraft") -> Rule:
    return Rule(title=f"[bold]{title}[/]", style="dim")


def _panel(body: str, title: str, border: str) -> Panel:
    return Panel(body, title=title, box=box.ROUNDED, border_style=border, padding=(0, 2))


def command_panel(title: str, fields: Mapping[str, str]) -> Panel:
    """Panel listing the parameters a command runs with, one ``label: value`` per line."""
    body = "\n".join(f"  [label]{label}:[/] [value]{value}[/]" for label, value in fields.items())
    return _panel(body, f"[bold]{title}[/]", "dim")


def success_panel(title: str, body: str) -> Panel:
    return _panel(body, f"[success]{title}[/]", "green")


def error_panel(message: str) -> Panel:
    return _panel(message, "[error]エラー[/]", "red")


def outline_tree(
    topic: str,
    outline: Sequence[ChapterOutline],
    written: Mapping[str, WrittenChapterContent],
) -> Tree:
    """Chapters with their overview and sections; written chapters are ticked."""
    tree = Tree(f"[bold]{topic}[/]")
    total = len(outline)
    for number, chapter in enumerate(outline, start=1):
        mark = "[success]✓[/] " if chapter.id in written else ""
        label = chapter_title_text(number, total, chapter.title)
        node = tree.add(f"{mark}[chapter]{label}[/] [muted]({chapter.id})[/]")
        node.add(f"[muted]{chapter.overview}[/]")
        for section in chapter.sections:
            node.add(f"{section.title} [muted]- {section.summary}[/]")
    return tree


def saved_chapters_table(chapters: Sequence[SavedChapter]) -> Table:
    table = Table(box=box.SIMPLE_HEAVY, show_edge=False)
    table.add_column("ID", style="muted")
    table.add_column("タイトル", style="bold")
    table.add_column("文字数", justify="right")
    table.add_column("意図 / フック")
    for chapter in chapters:
        intent = chapter.intent
        if len(intent) > _INTENT_PREVIEW:
            intent = intent[:_INTENT_PREVIEW] + "..."
        table.add_row(chapter.id, chapter.title, str(len(chapter.content)), intent)
    return table

"""CLI entry point for bookdraft.

用法：
  bookdraft outline -t "テーマ"          目次案を生成して表示
  bookdraft draft -t "テーマ" --review  目次案の生成から全章執筆・推敲まで
  bookdraft saved list                  保存済みの章を一覧
  bookdraft cover ID --tone watercolor  保存済みの章の扉絵を生成
  bookdraft --help                      すべてのコマンドを表示
"""

import asyncio
import base64
import logging
import sys
from pathlib import Path

import click
from rich.markdown import Markdown
from rich.progress import Progress, SpinnerColumn, TextColumn

from cli.theme import (
    get_console,
    app_header,
    command_panel,
    success_panel,
    error_panel,
    outline_tree,
    saved_chapters_table,
)
from config.settings import Settings
from config.logging_config import setup_logging
from models.enums import Difficulty, ImageTone
from prompts.labels import get_difficulty_description
from tools.text_utils import count_total_chars
from workflow.session import DraftSession, OutlineParams

console = get_console()
logger = logging.getLogger(__name__)


def _init_logging(verbose: bool):
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.INFO
    settings = Settings()
    setup_logging(level=level, log_dir=settings.log_dir, console_enabled=verbose)


def _make_session() -> DraftSession:
    session = DraftSession(Settings())
    session.load_saved_chapters()
    return session


def _exit_on_error(session: DraftSession):
    if session.state.error:
        console.print(error_panel(session.state.error))
        sys.exit(1)


def _spinner() -> Progress:
    return Progress(
        SpinnerColumn("dots"),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
    )


def _outline_params(topic, direction, chapters, difficulty, thinking) -> OutlineParams:
    return OutlineParams(
        topic=topic,
        num_chapters=chapters,
        difficulty=difficulty,
        direction=direction or None,
        thinking_mode=thinking,
    )


def _outline_fields(params: OutlineParams) -> dict[str, str]:
    fields = {
        "テーマ": params.topic,
        "章数": f"{params.num_chapters} 章",
        "読者": f"{Difficulty(params.difficulty).name.lower()} ({get_difficulty_description(params.difficulty)})",
        "思考モード": "ON" if params.thinking_mode else "OFF",
    }
    if params.direction:
        fields["方向性"] = params.direction
    return fields


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose):
    """bookdraft: Gemini によるビジネス書執筆アシスタント

    \b
    目次案の生成、章の執筆と調整、全体推敲、扉絵の生成を行います。
      bookdraft outline -t "持続可能な経営"
      bookdraft draft -t "持続可能な経営" -c 5 --review -o book.md

    章や目次項目の個別調整は DraftSession.adjust_outline / adjust_chapter
    （ライブラリ API）から行います。
    """
    _init_logging(verbose)


_topic_options = [
    click.option("--topic", "-t", required=True, help="書籍のテーマ"),
    click.option("--direction", "-d", default="", help="全体の方向性（任意）"),
    click.option("--chapters", "-c", default=5, show_default=True,
                 type=click.IntRange(3, 12), help="章数"),
    click.option("--difficulty", "-l", default=3, show_default=True,
                 type=click.IntRange(1, 5), help="読者レベル（1=初心者 … 5=専門家）"),
    click.option("--thinking/--no-thinking", default=True, show_default=True,
                 help="思考モードで生成する"),
]


def topic_options(func):
    for option in reversed(_topic_options):
        func = option(func)
    return func


# ---------------------------------------------------------------------------
# outline command
# ---------------------------------------------------------------------------

@cli.command()
@topic_options
def outline(topic, direction, chapters, difficulty, thinking):
    """目次案を生成して表示します。"""
    params = _outline_params(topic, direction, chapters, difficulty, thinking)
    console.print(app_header())
    console.print()
    console.print(command_panel("目次案の生成", _outline_fields(params)))
    console.print()

    session = _make_session()
    with _spinner() as progress:
        progress.add_task("  目次案を生成中...", total=None)
        asyncio.run(session.generate_outline(params))
    _exit_on_error(session)

    console.print(outline_tree(session.state.topic, session.state.outline, session.state.written))


# ---------------------------------------------------------------------------
# draft command
# ---------------------------------------------------------------------------

async def _run_draft(session: DraftSession, params: OutlineParams, review: bool) -> int:
    if not await session.generate_outline(params):
        return 0
    written = await session.write_all_chapters()
    if written != len(session.state.outline):
        return written
    if review:
        await session.final_review()
    return written


@cli.command()
@topic_options
@click.option("--review", is_flag=True, help="全章執筆後に全体推敲を行う")
@click.option("--save", is_flag=True, help="執筆した章をすべて保存する")
@click.option("--output", "-o", type=click.Path(dir_okay=False, path_type=Path), default=None,
              help="原稿の書き出し先（省略時は標準出力）")
def draft(topic, direction, chapters, difficulty, thinking, review, save, output):
    """目次案の生成から全章の執筆までを一括で行います。

    例：
      bookdraft draft -t "持続可能な経営" -c 5 -l 3 --review -o book.md
    """
    params = _outline_params(topic, direction, chapters, difficulty, thinking)
    console.print(app_header())
    console.print()
    fields = _outline_fields(params)
    fields["全体推敲"] = "ON" if review else "OFF"
    console.print(command_panel("書籍の執筆", fields))
    console.print()

    session = _make_session()
    try:
        with _spinner() as progress:
            progress.add_task("  執筆中...", total=None)
            written = asyncio.run(_run_draft(session, params, review))
    except KeyboardInterrupt:
        console.print("\n[warning]中断しました[/]")
        sys.exit(130)
    _exit_on_error(session)

    if save:
        for chapter in session.state.outline:
            session.save_chapter(chapter.id)
        _exit_on_error(session)

    manuscript = session.export_manuscript()
    if output:
        output.write_text(manuscript, encoding="utf-8")
    else:
        console.print(Markdown(manuscript))

    total_chars = sum(count_total_chars(w.content) for w in session.state.written.values())
    console.print()
    console.print(success_panel("執筆完了", (
        f"  章数: [value]{written}[/] 章\n"
        f"  総文字数: [value]{total_chars:,}[/]"
        + (f"\n  出力: [value]{output}[/]" if output else "")
    )))
    usage = session.llm.get_usage_summary()
    console.print(f"\n[muted]API呼び出し: {usage.get('total_calls', 0)} 回[/]")


# ---------------------------------------------------------------------------
# saved command group
# ---------------------------------------------------------------------------

@cli.group()
def saved():
    """保存済みの章を管理します。"""


@saved.command(name="list")
def saved_list():
    """保存済みの章を一覧表示します。"""
    session = _make_session()
    if not session.state.saved:
        console.print("[muted]保存済みの章はありません。[/]")
        return
    console.print(saved_chapters_table(session.state.saved))


@saved.command(name="show")
@click.argument("chapter_id")
def saved_show(chapter_id):
    """保存済みの章を表示します。"""
    session = _make_session()
    chapter = next((c for c in session.state.saved if c.id == chapter_id), None)
    if chapter is None:
        console.print(f"[error]ID {chapter_id} の保存済みの章が見つかりません[/]")
        sys.exit(1)
    console.print(app_header(chapter.title))
    console.print(f"[muted]{chapter.intent}[/]\n")
    console.print(Markdown(chapter.content))


@saved.command(name="delete")
@click.argument("chapter_id")
def saved_delete(chapter_id):
    """保存済みの章を削除します。"""
    session = _make_session()
    existed = session.state.is_saved(chapter_id)
    session.delete_saved_chapter(chapter_id)
    _exit_on_error(session)
    if existed:
        console.print(f"[success]削除しました: {chapter_id}[/]")
    else:
        console.print(f"[muted]ID {chapter_id} の保存済みの章はありません。[/]")


# ---------------------------------------------------------------------------
# cover command
# ---------------------------------------------------------------------------

def _write_data_uri(data_uri: str, path: Path):
    _, encoded = data_uri.split(",", 1)
    path.write_bytes(base64.b64decode(encoded))


@cli.command()
@click.argument("chapter_id")
@click.option("--tone", type=click.Choice([t.value for t in ImageTone]),
              default=ImageTone.WATERCOLOR.value, show_default=True, help="画風")
@click.option("--output", "-o", type=click.Path(dir_okay=False, path_type=Path), required=True,
              help="JPEG の保存先")
def cover(chapter_id, tone, output):
    """保存済みの章から扉絵を生成します。"""
    session = _make_session()
    with _spinner() as progress:
        progress.add_task("  画像を生成中...", total=None)
        data_uri = asyncio.run(session.generate_saved_cover(chapter_id, tone))
    _exit_on_error(session)

    _write_data_uri(data_uri, output)
    console.print(success_panel("画像生成完了", f"  出力: [value]{output}[/]"))


def main():
    """Entry point."""
    cli()


if __name__ == "__main__":
    main()

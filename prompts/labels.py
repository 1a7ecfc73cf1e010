"""Reader-level descriptions and chapter numbering for prompt text."""

from typing import Sequence

_DIFFICULTY_DESCRIPTIONS = {
    1: "このトピックに関する事前の知識が全くない完全な初心者",
    2: "このトピックについて基本的な理解がある人々",
    3: "この特定分野の専門家ではないが、一般的に知識のある平均的なビジネスパーソン",
    4: "このトピックにおいて重要な経験と高度な知識を持つ個人",
    5: "この特定分野の第一線の専門家、研究者、または教授",
}
_DEFAULT_AUDIENCE = "一般的なビジネスオーディエンス"

_KANJI_NUMERALS = ["", "一", "二", "三", "四", "五", "六", "七", "八", "九", "十", "十一"]


def get_difficulty_description(level: int) -> str:
    """Map a 1-5 reader level to its audience description."""
    return _DIFFICULTY_DESCRIPTIONS.get(int(level), _DEFAULT_AUDIENCE)


def number_to_kanji(num: int) -> str:
    """Render 1-11 as kanji numerals; anything else as the plain number."""
    if 1 <= num < len(_KANJI_NUMERALS):
        return _KANJI_NUMERALS[num]
    return str(num)


def chapter_title_text(chapter_number: int, total_chapters: int, title: str) -> str:
    """Human-facing chapter label.

    The first and last slots of a multi-chapter book are the prologue and
    epilogue, so chapter 2 is labelled "第一章", chapter 3 "第二章", and so on.
    """
    if total_chapters > 1 and chapter_number == 1:
        return f"序章：{title}"
    if total_chapters > 1 and chapter_number == total_chapters:
        return f"終章：{title}"
    if total_chapters == 1:
        return title
    return f"第{number_to_kanji(chapter_number - 1)}章：{title}"


def table_of_contents(all_titles: Sequence[str], total_chapters: int) -> str:
    return "\n".join(
        f"- {chapter_title_text(i + 1, total_chapters, title)}"
        for i, title in enumerate(all_titles)
    )


def chapter_bookends(
    topic: str,
    chapter_title: str,
    chapter_number: int,
    total_chapters: int,
    all_titles: Sequence[str],
) -> tuple[str, str]:
    """Return the mandatory (introduction, conclusion) blocks for a chapter.

    Both are empty for single-chapter books.
    """
    if total_chapters <= 1:
        return "", ""

    toc = table_of_contents(all_titles, total_chapters)

    if chapter_number == 1:
        next_label = chapter_title_text(2, total_chapters, all_titles[1])
        intro = f"この書籍は「{topic}」というテーマで執筆しています。\n\n## この書籍の目次\n{toc}\n\n---\n\n"
        outro = f"\n\n---\n\n次章（{next_label}）では、本格的な議論を始めていきます。"
    elif chapter_number == total_chapters:
        intro = (
            f"この書籍は「{topic}」というテーマで執筆してきました。本章が最終章となります。"
            f"\n\n## この書籍の目次\n{toc}\n\n---\n\n"
        )
        outro = (
            f"\n\n---\n\n以上で書籍「{topic}」は完結です。最後までお読みいただき、ありがとうございました。"
            f"\n\n### 引用・参考文献\n- (ここに参考文献を記載)\n"
        )
    else:
        next_label = chapter_title_text(chapter_number + 1, total_chapters, all_titles[chapter_number])
        intro = (
            f"この書籍は「{topic}」というテーマで執筆しています。\n\n## この書籍の目次\n{toc}"
            f"\n\nこのnoteでは、「{chapter_title}」について書きます。\n\n---\n\n"
        )
        outro = f"\n\n---\n\n次章（{next_label}）では、さらに議論を深めていきます。"

    return intro, outro

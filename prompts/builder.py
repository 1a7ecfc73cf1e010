"""Prompt construction for every Gemini request.

Each builder is a pure function returning a :class:`PromptRequest`: the system
instruction, the user message, the response schema sent to the model, and the
pydantic type the parsed response is validated against locally.
"""

import json
from dataclasses import dataclass
from typing import Any, Optional, Sequence

from config.exceptions import InvalidParameterError
from models.chapter import ChapterPlan, FinalReviewResult, ReviewedChapter, WrittenChapterContent
from models.enums import ImageTone
from prompts.labels import chapter_bookends, get_difficulty_description
from prompts.persona import WRITING_STYLE_SUMMARY
from prompts.schemas import (
    CHAPTER_CONTENT_SCHEMA,
    CHAPTER_PLAN_SCHEMA,
    FINAL_REVIEW_SCHEMA,
    OUTLINE_SCHEMA,
)


@dataclass(frozen=True)
class PromptRequest:
    instruction: str
    message: str
    schema: dict
    response_model: Any


def _dump(data: Any) -> str:
    """Indented JSON, the way outlines are embedded in instructions."""
    return json.dumps(data, ensure_ascii=False, indent=2)


# ---------------------------------------------------------------------------
# Outline
# ---------------------------------------------------------------------------

def build_outline_prompt(
    topic: str,
    num_chapters: int,
    difficulty: int,
    persona: str = WRITING_STYLE_SUMMARY,
    direction: Optional[str] = None,
) -> PromptRequest:
    """Build the table-of-contents request.

    ``num_chapters`` is a positive integer by contract; callers keep it in
    3-12 and the model is only asked to match it.
    """
    if not topic or not topic.strip():
        raise InvalidParameterError("topic", "Book topic must not be blank")

    direction_line = f"執筆の方向性: 「{direction}」" if direction else ""
    instruction = f"""
{persona}
上記のペルソナと文体を厳格に守り、日本のビジネスパーソンをターゲットにしたブログプラットフォーム「note」向けの書籍の構成案を作成してください。

書籍のテーマ: "{topic}"
章の数: {num_chapters}章
{direction_line}
読者レベル: {get_difficulty_description(difficulty)}

各章について、以下の構造で詳細な構成案を生成してください。
1.  **title**: 読者の興味を引く、示唆に富んだ章のタイトル。
2.  **overview**: この章で書く内容の3〜5行程度のサマリー。
3.  **purpose**: 書籍全体の中で、この章が担う役割や意図。
4.  **sections**: 章を構成する適切な数の「節」。各節には「title」（節のタイトル）と「summary」（100文字程度の節の概要）を含めてください。
"""
    message = f"テーマ「{topic}」について、{num_chapters}章構成で書籍の詳細な目次案を作成してください。"
    return PromptRequest(instruction, message, OUTLINE_SCHEMA, list[ChapterPlan])


def build_outline_adjustment_prompt(
    current: ChapterPlan,
    instruction: str,
    persona: str = WRITING_STYLE_SUMMARY,
) -> PromptRequest:
    system_instruction = f"""
{persona}
あなたは上記のペルソナと文体を理解した優秀な編集者です。以下の書籍の章の構成案を、ユーザーからの指示に基づいて修正してください。
出力形式は元の形式（JSON）を維持してください。

元の構成案:
{_dump(current.model_dump(exclude={"id"}))}

ユーザーからの修正指示:
「{instruction}」
"""
    message = f"ユーザーの指示「{instruction}」に従って、章の構成案を修正してください。"
    return PromptRequest(system_instruction, message, CHAPTER_PLAN_SCHEMA, ChapterPlan)


# ---------------------------------------------------------------------------
# Chapter prose
# ---------------------------------------------------------------------------

def build_chapter_write_prompt(
    topic: str,
    chapter: ChapterPlan,
    chapter_number: int,
    total_chapters: int,
    all_titles: Sequence[str],
    persona: str = WRITING_STYLE_SUMMARY,
) -> PromptRequest:
    """Build the request that writes one chapter from its outline.

    ``chapter_number`` is 1-based. The intro/outro blocks must come back
    verbatim at the start and end of the generated content (rule 6).
    """
    intro, outro = chapter_bookends(topic, chapter.title, chapter_number, total_chapters, all_titles)

    instruction = f"""
{persona}

あなたは上記のペルソナと文体を厳格に守り、指定された構成案に基づいて、「note」向けの書籍の1章分を執筆します。

章のタイトル: "{chapter.title}"
この章の構成案:
{_dump(chapter.model_dump(exclude={"id"}))}

以下のルールを厳守してください：
1.  章全体の文字数は、厳密に2,000文字から5,000文字の間でなければなりません。
2.  読者がエンゲージ（スキ、シェア）したくなるような、洞察に富んだ内容にしてください。
3.  モバイルで読みやすいよう、Markdown形式を積極的に活用し、見出し（H2, H3）、太字、引用、箇条書きリストを使ってください。
    -   H2（##）は節のタイトルに使用してください。
4.  絵文字は一切使用しないでください。
5.  ハッシュタグは文末に3〜5個含めてください。
6.  以下の導入文と結びの文を、生成する本文の最初と最後に必ず含めてください。
    -   **導入**:
{intro}
    -   **結び**:
{outro}
7.  終章の場合は、全体の振り返りとして各章の簡単なサマリーを本文に含め、「引用・参考文献」の項目を末尾に用意してください。
"""
    message = f"「{chapter.title}」というタイトルの章を執筆してください。"
    return PromptRequest(instruction, message, CHAPTER_CONTENT_SCHEMA, WrittenChapterContent)


def build_chapter_adjustment_prompt(
    original: WrittenChapterContent,
    instruction: str,
    persona: str = WRITING_STYLE_SUMMARY,
) -> PromptRequest:
    system_instruction = f"""
{persona}
あなたは上記のペルソナと文体を厳格に守り、既存の書籍の章を修正します。
元の章の内容：
「{original.content}」

元の章の意図：
「{original.intent}」

以下の指示に従って、この章を修正してください： 「{instruction}」

修正後もMarkdown形式を維持し、絵文字は使用しないでください。文字数は2,000〜5,000字の範囲を維持してください。
"""
    return PromptRequest(system_instruction, "章を修正してください。", CHAPTER_CONTENT_SCHEMA, WrittenChapterContent)


# ---------------------------------------------------------------------------
# Final review
# ---------------------------------------------------------------------------

def build_final_review_prompt(
    chapters: Sequence[ReviewedChapter],
    persona: str = WRITING_STYLE_SUMMARY,
) -> PromptRequest:
    """Build the single whole-book copy-edit request."""
    instruction = f"""
{persona}
あなたは書籍全体をレビューする優秀な編集者です。
以下の各章からなる書籍の原稿をすべて読み込み、以下の観点で推敲・修正してください。
-   言い回しや表現の統一
-   専門用語の揺れの修正
-   全体としての一貫性と流れの改善

修正後の各章の全文を、元のペルソナとMarkdown形式を維持したまま、JSON形式で返却してください。
"""
    manuscript = json.dumps(
        [c.model_dump() for c in chapters],
        ensure_ascii=False,
        separators=(",", ":"),
    )
    message = f"以下の書籍原稿を推敲してください：\n{manuscript}"
    return PromptRequest(instruction, message, FINAL_REVIEW_SCHEMA, FinalReviewResult)


# ---------------------------------------------------------------------------
# Cover image
# ---------------------------------------------------------------------------

_TONE_INSTRUCTIONS = {
    ImageTone.LINE_ART: (
        "Create a minimalist and sophisticated line art image on a clean white background. "
        "Use a single, elegant PANTONE accent color. Any text included must be in English. "
        "The overall feel should be modern and professional."
    ),
    ImageTone.WATERCOLOR: (
        "Create a gentle and light watercolor painting. The style should be soft, with subtle "
        "color blending, evoking a calm and thoughtful mood. If any text is included, it must be in English."
    ),
    ImageTone.CREATIVE: (
        "Creatively and abstractly interpret the theme. Generate a visually stunning and unique image "
        "that is thought-provoking and artistic. Feel free to use any style that best represents the "
        "core concept. If any text is included, it must be in English."
    ),
}


def build_image_prompt(content: str, tone: ImageTone | str) -> str:
    try:
        tone_instruction = _TONE_INSTRUCTIONS[ImageTone(tone)]
    except ValueError as e:
        raise InvalidParameterError("tone", f"Unknown image tone: {tone}") from e
    return f"""
Generate a cover image for a Japanese 'note' article (1280x670px). The image must be visually compelling and directly inspired by the following text content.

**Image Style:** {tone_instruction}

**Text Content to Inspire Image:**
"{content}"

Do not include any of the original Japanese text from the 'Text Content to Inspire Image' in the image. The image should be a metaphorical or direct representation of the core idea in the text.
"""

"""User-facing (Japanese) error messages for failed actions."""

from config.exceptions import (
    BookDraftError,
    ConfigurationError,
    InvalidParameterError,
    PreconditionError,
)

UNKNOWN_ERROR = "不明なエラーが発生しました。"
MISSING_API_KEY = "API_KEYが設定されていません。"
BLANK_TOPIC = "書籍のテーマを入力してください。"
BLANK_INSTRUCTION = "修正指示を入力してください。"
REVIEW_NOT_READY = "すべての章を執筆してから全体推敲を実行してください。"
CHAPTER_NOT_WRITTEN = "この章はまだ執筆されていません。"

ACTION_FAILURES = {
    "generate_outline": "目次案の生成に失敗しました。",
    "adjust_outline": "構成案の修正に失敗しました。",
    "write_chapter": "章の執筆に失敗しました。",
    "adjust_chapter": "章の調整に失敗しました。",
    "final_review": "全体推敲に失敗しました。",
    "generate_cover": "画像の生成に失敗しました。",
    "save_chapter": "章の保存に失敗しました。",
    "delete_chapter": "章の削除に失敗しました。",
}


def describe_error(action: str, error: Exception) -> str:
    """Turn an exception raised by ``action`` into the message shown to the user."""
    if isinstance(error, ConfigurationError):
        return MISSING_API_KEY
    if isinstance(error, InvalidParameterError):
        if error.parameter == "topic":
            return BLANK_TOPIC
        if error.parameter == "instruction":
            return BLANK_INSTRUCTION
        return UNKNOWN_ERROR
    if isinstance(error, PreconditionError):
        if action == "final_review":
            return REVIEW_NOT_READY
        return CHAPTER_NOT_WRITTEN
    if isinstance(error, BookDraftError):
        return ACTION_FAILURES.get(action, UNKNOWN_ERROR)
    return UNKNOWN_ERROR

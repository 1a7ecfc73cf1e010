"""Chapter outline and content models."""

from pydantic import BaseModel, ConfigDict


class Section(BaseModel):
    """One section ("節") inside a chapter outline."""
    model_config = ConfigDict(frozen=True)

    title: str
    summary: str


class ChapterPlan(BaseModel):
    """A chapter outline as exchanged with the model (no local identifier)."""
    model_config = ConfigDict(frozen=True)

    title: str
    overview: str
    purpose: str
    sections: list[Section]


class ChapterOutline(ChapterPlan):
    """A chapter outline inside the current draft."""
    id: str

    def to_plan(self) -> ChapterPlan:
        """Strip the local identifier before sending the outline to the model."""
        return ChapterPlan.model_validate(self.model_dump(exclude={"id"}))

    def with_plan(self, plan: ChapterPlan) -> "ChapterOutline":
        """Return a copy with every non-id field replaced by ``plan``."""
        return ChapterOutline(id=self.id, **plan.model_dump())


class WrittenChapterContent(BaseModel):
    model_config = ConfigDict(frozen=True)

    content: str
    intent: str


class SavedChapter(ChapterOutline):
    """Snapshot of an outline entry plus its written content at save time."""
    content: str
    intent: str

    @classmethod
    def snapshot(cls, outline: ChapterOutline, written: WrittenChapterContent) -> "SavedChapter":
        # model_dump copies nested sections, so later edits never reach the snapshot
        return cls(**outline.model_dump(), **written.model_dump())


class ReviewedChapter(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    content: str


class FinalReviewResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    chapters: list[ReviewedChapter]

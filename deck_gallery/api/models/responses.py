"""Response models for the API."""

from pydantic import BaseModel, Field


class SplitResponse(BaseModel):
    """Slides produced from uploaded files."""

    slides: list[str] = Field(..., description="Standalone slide documents in order")
    slide_count: int


class PresentationSummary(BaseModel):
    """Gallery card for a presentation, without slide content."""

    id: str
    title: str
    description: str
    author_id: str
    author_name: str
    thumbnail_url: str
    framework: str
    privacy: str
    views: int
    uploaded_at: str
    tags: list[str]
    slide_count: int


class SlideItem(BaseModel):
    """One slide of a presentation."""

    index: int
    html: str
    slide_id: str | None = None


class PresentationDetail(PresentationSummary):
    """Presentation including all slide documents."""

    slides: list[SlideItem]


class EditorMessageResponse(BaseModel):
    """Outcome of applying a visual editor message."""

    changed: bool

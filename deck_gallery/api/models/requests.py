"""Request models for the API."""

from typing import Optional

from pydantic import BaseModel, Field, field_validator


class UpdateSlideRequest(BaseModel):
    """Request to replace a slide's HTML document."""

    html: str = Field(..., description="Complete replacement slide document", min_length=1)


class EditorMessageRequest(BaseModel):
    """Message posted by the visual editor frame.

    Attributes:
        type: Message type, only SLIDE_UPDATE changes the slide
        content: Full document of the edited slide
    """

    type: str = Field(..., description="Message type")
    content: Optional[str] = Field(default=None, description="Edited slide document")


class PublishRequest(BaseModel):
    """Request to publish already split (and possibly edited) slides."""

    slides: list[str] = Field(..., min_length=1, description="Slide documents in order")
    title: str = Field(..., min_length=1, max_length=300)
    description: str = ""
    thumbnail_url: str = ""
    framework: str = "Custom HTML"
    privacy: str = "Public"
    tags: list[str] = Field(default_factory=list)
    use_thumbnail_as_cover: bool = False
    presentation_id: Optional[str] = None

    @field_validator("tags")
    @classmethod
    def strip_tags(cls, value: list[str]) -> list[str]:
        """Drop blank tags and surrounding whitespace."""
        return [tag.strip() for tag in value if tag and tag.strip()]

    class Config:
        """Pydantic model configuration."""

        json_schema_extra = {
            "example": {
                "slides": ["<!DOCTYPE html><html><body><h1>Hello</h1></body></html>"],
                "title": "Quarterly review",
                "framework": "Reveal.js",
                "privacy": "Public",
                "tags": ["finance"],
            }
        }

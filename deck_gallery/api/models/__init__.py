"""API request and response models."""

from deck_gallery.api.models.requests import EditorMessageRequest, PublishRequest, UpdateSlideRequest
from deck_gallery.api.models.responses import (
    EditorMessageResponse,
    PresentationDetail,
    PresentationSummary,
    SlideItem,
    SplitResponse,
)

__all__ = [
    "EditorMessageRequest",
    "EditorMessageResponse",
    "PresentationDetail",
    "PresentationSummary",
    "PublishRequest",
    "SlideItem",
    "SplitResponse",
    "UpdateSlideRequest",
]

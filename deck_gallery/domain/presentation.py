"""Presentation class: an ordered, mutable sequence of slide documents plus gallery metadata."""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Iterable, Iterator, List, Optional

from deck_gallery.utils.deck_splitter import split_uploads
from deck_gallery.utils.error_handling import ResourceNotFoundError, SlideDeletionError

from .slide import Slide


class PresentationFramework(str, Enum):
    """Framework a deck was authored with."""

    REVEAL_JS = "Reveal.js"
    IMPRESS_JS = "Impress.js"
    BESPOKE_JS = "Bespoke.js"
    CUSTOM = "Custom HTML"


class PrivacyMode(str, Enum):
    """Who can see a presentation in the gallery."""

    PUBLIC = "Public"
    UNLISTED = "Unlisted"
    PRIVATE = "Private"
    SAMPLE_OBFUSCATED = "Sample (Obfuscated)"


class Presentation:
    """A published (or in-progress) deck with operations for manipulating its slides.

    Slides are kept in upload order. Each slide is a standalone HTML document,
    so inserting, removing or replacing one never affects the others.

    Attributes:
        id: Presentation identifier
        title: Display title
        description: Short description
        author_id: Identifier of the uploading user
        author_name: Display name of the uploading user
        thumbnail_url: Cover image URL (may be a data URI)
        slides: Ordered list of Slide objects
        framework: Framework the deck was authored with
        privacy: Gallery visibility
        views: View counter
        uploaded_at: ISO-8601 upload timestamp
        tags: Free-form tags
    """

    def __init__(
        self,
        id: str,
        title: str,
        slides: Optional[List[Slide]] = None,
        description: str = "",
        author_id: str = "",
        author_name: str = "",
        thumbnail_url: str = "",
        framework: PresentationFramework = PresentationFramework.CUSTOM,
        privacy: PrivacyMode = PrivacyMode.PUBLIC,
        views: int = 0,
        uploaded_at: Optional[str] = None,
        tags: Optional[List[str]] = None,
    ):
        self.id = id
        self.title = title
        self.slides = slides or []
        self.description = description
        self.author_id = author_id
        self.author_name = author_name
        self.thumbnail_url = thumbnail_url
        self.framework = PresentationFramework(framework)
        self.privacy = PrivacyMode(privacy)
        self.views = views
        self.uploaded_at = uploaded_at or datetime.now(timezone.utc).isoformat()
        self.tags = tags or []

    @classmethod
    def from_slide_html(cls, id: str, title: str, slide_htmls: Iterable[str], **metadata: Any) -> 'Presentation':
        """Build a presentation from already split slide documents."""
        slides = [
            Slide(html=html, slide_id=f"slide_{idx}")
            for idx, html in enumerate(slide_htmls)
        ]
        return cls(id=id, title=title, slides=slides, **metadata)

    @classmethod
    def from_uploads(cls, id: str, title: str, files, **metadata: Any) -> 'Presentation':
        """Build a presentation from uploaded (filename, content) pairs.

        Reveal.js decks are split into one slide per leaf section; other
        files become a single slide each.
        """
        return cls.from_slide_html(id, title, split_uploads(files), **metadata)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self.slides):
            raise ResourceNotFoundError(
                f"Slide index {index} out of range",
                details={"presentation_id": self.id, "slide_count": len(self.slides)},
            )

    def insert_slide(self, slide: Slide, position: int) -> None:
        """Insert slide at the specified position."""
        self.slides.insert(position, slide)

    def append_slide(self, slide: Slide) -> None:
        """Append a slide to the end of the presentation."""
        self.slides.append(slide)

    def remove_slide(self, index: int) -> Slide:
        """Remove and return slide at index.

        Args:
            index: Index of slide to remove

        Returns:
            The removed Slide object

        Raises:
            ResourceNotFoundError: If index is out of range
            SlideDeletionError: If it is the only remaining slide
        """
        self._check_index(index)
        if len(self.slides) <= 1:
            raise SlideDeletionError(
                "Presentation must have at least one slide.",
                details={"presentation_id": self.id},
            )
        return self.slides.pop(index)

    def get_slide(self, index: int) -> Slide:
        """Retrieve slide by index.

        Raises:
            ResourceNotFoundError: If index is out of range
        """
        self._check_index(index)
        return self.slides[index]

    def replace_slide(self, index: int, html: str) -> Slide:
        """Replace the document of the slide at index wholesale.

        Returns:
            The updated Slide object
        """
        slide = self.get_slide(index)
        slide.replace_html(html)
        return slide

    def move_slide(self, from_index: int, to_index: int) -> None:
        """Move slide from one position to another."""
        self._check_index(from_index)
        slide = self.slides.pop(from_index)
        self.slides.insert(to_index, slide)

    def render_slide(self, index: int, fit: bool = True) -> str:
        """Return the document for slide ``index`` ready for a rendering frame."""
        return self.get_slide(index).render(fit=fit)

    def record_view(self) -> int:
        """Increment and return the view counter."""
        self.views += 1
        return self.views

    def summary(self) -> Dict[str, Any]:
        """Gallery card fields, without slide content."""
        return {
            'id': self.id,
            'title': self.title,
            'description': self.description,
            'author_id': self.author_id,
            'author_name': self.author_name,
            'thumbnail_url': self.thumbnail_url,
            'framework': self.framework.value,
            'privacy': self.privacy.value,
            'views': self.views,
            'uploaded_at': self.uploaded_at,
            'tags': list(self.tags),
            'slide_count': len(self.slides),
        }

    def to_dict(self) -> Dict[str, Any]:
        """Convert to JSON-serializable dictionary for API use."""
        data = self.summary()
        data['slides'] = [
            {
                'index': idx,
                'html': slide.to_html(),
                'slide_id': slide.slide_id,
            }
            for idx, slide in enumerate(self.slides)
        ]
        return data

    def __len__(self) -> int:
        return len(self.slides)

    def __iter__(self) -> Iterator[Slide]:
        return iter(self.slides)

    def __getitem__(self, index: int) -> Slide:
        return self.slides[index]

    def __str__(self) -> str:
        return f"Presentation(title={self.title!r}, slides={len(self.slides)})"

    def __repr__(self) -> str:
        return (
            f"Presentation(id={self.id!r}, title={self.title!r}, slides={len(self.slides)}, "
            f"framework={self.framework.value!r}, privacy={self.privacy.value!r})"
        )

"""In-memory presentation gallery.

Holds published presentations and implements the upload, publish, slide
editing and deletion flows used by the API routes. All access to the store
goes through a lock so concurrent requests see consistent slide lists.
"""

import html
import logging
import threading
import uuid
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from deck_gallery.config.settings import UploadSettings, get_settings
from deck_gallery.domain.presentation import Presentation, PresentationFramework, PrivacyMode
from deck_gallery.domain.slide import Slide
from deck_gallery.utils.deck_splitter import split_uploads
from deck_gallery.utils.editor_bridge import apply_editor_message
from deck_gallery.utils.error_handling import ResourceNotFoundError, ValidationError

logger = logging.getLogger(__name__)

UploadedFile = Tuple[str, Union[bytes, str]]


def build_cover_slide(title: str, description: str, thumbnail_url: str) -> str:
    """Build a cover slide showing the thumbnail behind the title and description."""
    title = html.escape(title)
    description = html.escape(description)
    thumbnail_url = html.escape(thumbnail_url, quote=True)
    return f"""
            <div style="width: 100vw; height: 100vh; position: relative; background: #020617; overflow: hidden; display: flex; flex-direction: column; align-items: center; justify-content: center; font-family: system-ui, -apple-system, sans-serif;">
                <div style="position: absolute; inset: 0; z-index: 0; opacity: 0.5;">
                    <img src="{thumbnail_url}" style="width: 100%; height: 100%; object-fit: cover; filter: blur(8px) brightness(0.7); transform: scale(1.1);">
                </div>
                <div style="position: relative; z-index: 10; text-align: center; padding: 2rem; max-width: 90%; width: 1000px;">
                     <div style="margin-bottom: 2rem; border-radius: 1rem; overflow: hidden; box-shadow: 0 20px 50px -12px rgba(0, 0, 0, 0.7); display: inline-block; border: 1px solid rgba(255,255,255,0.1);">
                        <img src="{thumbnail_url}" style="max-height: 400px; width: auto; max-width: 100%; display: block;">
                     </div>
                    <h1 style="font-size: clamp(2.5rem, 5vw, 4.5rem); font-weight: 800; color: white; margin: 0 0 1rem 0; line-height: 1.1; text-shadow: 0 4px 12px rgba(0,0,0,0.5); letter-spacing: -0.02em;">{title}</h1>
                    <p style="font-size: clamp(1.1rem, 2vw, 1.5rem); color: #e2e8f0; margin: 0 auto; line-height: 1.6; text-shadow: 0 2px 4px rgba(0,0,0,0.5); max-width: 800px;">{description}</p>
                </div>
            </div>
        """


class GalleryService:
    """Store of published presentations with slide editing operations.

    Newly published presentations are listed first. Slides are standalone
    documents and are always replaced wholesale.
    """

    def __init__(self, upload_settings: Optional[UploadSettings] = None):
        """Initialize the gallery.

        Args:
            upload_settings: Upload limits and default authorship
        """
        self.upload_settings = upload_settings or UploadSettings()
        self._presentations: List[Presentation] = []
        self._lock = threading.Lock()

    def split_files(self, files: Iterable[UploadedFile]) -> List[str]:
        """Split uploaded files into slides without storing anything.

        Raises:
            ValidationError: If no files were given or too many were
        """
        files = list(files)
        if not files:
            raise ValidationError("At least one file is required")
        if len(files) > self.upload_settings.max_files:
            raise ValidationError(
                f"Too many files: {len(files)} (max {self.upload_settings.max_files})",
                details={"file_count": len(files)},
            )
        return split_uploads(files)

    def publish(
        self,
        slide_htmls: List[str],
        title: str,
        description: str = "",
        thumbnail_url: str = "",
        framework: Union[str, PresentationFramework] = PresentationFramework.CUSTOM,
        privacy: Union[str, PrivacyMode] = PrivacyMode.PUBLIC,
        tags: Optional[List[str]] = None,
        use_thumbnail_as_cover: bool = False,
        presentation_id: Optional[str] = None,
        author_id: Optional[str] = None,
        author_name: Optional[str] = None,
    ) -> Presentation:
        """Create (or replace, when ``presentation_id`` exists) a presentation.

        Args:
            slide_htmls: Slide documents in order
            title: Presentation title
            description: Presentation description
            thumbnail_url: Cover image URL
            framework: Authoring framework
            privacy: Gallery visibility
            tags: Free-form tags
            use_thumbnail_as_cover: Prepend a generated cover slide
            presentation_id: Existing id to replace, or None for a new one
            author_id: Uploading user id
            author_name: Uploading user name

        Returns:
            The stored Presentation

        Raises:
            ValidationError: If there are no slides or the metadata is invalid
        """
        if not slide_htmls:
            raise ValidationError("Presentation must have at least one slide.")
        if not title or not title.strip():
            raise ValidationError("Presentation title is required")

        slides = list(slide_htmls)
        if use_thumbnail_as_cover and thumbnail_url:
            slides.insert(0, build_cover_slide(title, description, thumbnail_url))

        try:
            framework = PresentationFramework(framework)
            privacy = PrivacyMode(privacy)
        except ValueError as e:
            raise ValidationError(str(e)) from e

        with self._lock:
            existing = self._find(presentation_id) if presentation_id else None
            presentation = Presentation.from_slide_html(
                id=presentation_id or uuid.uuid4().hex[:9],
                title=title,
                slide_htmls=slides,
                description=description,
                author_id=existing.author_id if existing else (author_id or self.upload_settings.default_author_id),
                author_name=existing.author_name if existing else (author_name or self.upload_settings.default_author_name),
                thumbnail_url=thumbnail_url,
                framework=framework,
                privacy=privacy,
                views=existing.views if existing else 0,
                uploaded_at=existing.uploaded_at if existing else None,
                tags=tags,
            )
            replaced = self._store(presentation)

        self._log_saved(presentation, replaced)
        return presentation

    def create_from_uploads(self, files: Iterable[UploadedFile], title: str, **metadata: Any) -> Presentation:
        """Split uploaded files and publish them as one presentation."""
        return self.publish(self.split_files(files), title, **metadata)

    # The helpers below expect self._lock to be held by the caller.

    def _find(self, presentation_id: str) -> Optional[Presentation]:
        for presentation in self._presentations:
            if presentation.id == presentation_id:
                return presentation
        return None

    def _require(self, presentation_id: str) -> Presentation:
        presentation = self._find(presentation_id)
        if presentation is None:
            raise ResourceNotFoundError(
                f"Presentation not found: {presentation_id}",
                details={"presentation_id": presentation_id},
            )
        return presentation

    def _store(self, presentation: Presentation) -> bool:
        for idx, existing in enumerate(self._presentations):
            if existing.id == presentation.id:
                self._presentations[idx] = presentation
                return True
        self._presentations.insert(0, presentation)
        return False

    @staticmethod
    def _log_saved(presentation: Presentation, replaced: bool) -> None:
        if replaced:
            logger.info("Updated presentation", extra={"presentation_id": presentation.id})
        else:
            logger.info(
                "Published presentation",
                extra={"presentation_id": presentation.id, "slide_count": len(presentation)},
            )

    def save_presentation(self, presentation: Presentation) -> None:
        """Store a presentation, replacing one with the same id in place."""
        with self._lock:
            replaced = self._store(presentation)
        self._log_saved(presentation, replaced)

    def list_presentations(self) -> List[Presentation]:
        """Return all presentations, newest first."""
        with self._lock:
            return list(self._presentations)

    def get_presentation(self, presentation_id: str) -> Presentation:
        """Retrieve a presentation by id.

        Raises:
            ResourceNotFoundError: If it does not exist
        """
        with self._lock:
            return self._require(presentation_id)

    def delete_presentation(self, presentation_id: str) -> None:
        """Delete a presentation by id.

        Raises:
            ResourceNotFoundError: If it does not exist
        """
        with self._lock:
            self._presentations.remove(self._require(presentation_id))
        logger.info("Deleted presentation", extra={"presentation_id": presentation_id})

    def record_view(self, presentation_id: str) -> int:
        """Increment the view counter of a presentation."""
        with self._lock:
            return self._require(presentation_id).record_view()

    def get_slide(self, presentation_id: str, index: int) -> Slide:
        with self._lock:
            return self._require(presentation_id).get_slide(index)

    def render_slide(self, presentation_id: str, index: int, fit: Optional[bool] = None) -> str:
        """Return the slide document to load into a rendering frame.

        Args:
            presentation_id: Presentation id
            index: Slide index
            fit: Inject the fit-to-width script; defaults to the upload setting
        """
        if fit is None:
            fit = self.upload_settings.fit_slides
        return self.get_slide(presentation_id, index).render(fit=fit)

    def update_slide(self, presentation_id: str, index: int, html_content: str) -> Slide:
        """Replace the document of one slide."""
        with self._lock:
            slide = self._require(presentation_id).replace_slide(index, html_content)
        logger.info(
            "Replaced slide",
            extra={"presentation_id": presentation_id, "slide_index": index},
        )
        return slide

    def delete_slide(self, presentation_id: str, index: int) -> Presentation:
        """Delete one slide; the last remaining slide cannot be deleted."""
        with self._lock:
            presentation = self._require(presentation_id)
            presentation.remove_slide(index)
        logger.info(
            "Deleted slide",
            extra={
                "presentation_id": presentation_id,
                "slide_index": index,
                "new_count": len(presentation),
            },
        )
        return presentation

    def apply_editor_message(self, presentation_id: str, index: int, message: Dict[str, Any]) -> bool:
        """Apply a visual editor frame message to one slide."""
        with self._lock:
            return apply_editor_message(self._require(presentation_id), index, message)


# Global service instance
_gallery_service_instance: Optional[GalleryService] = None


def get_gallery_service() -> GalleryService:
    """Get the global GalleryService instance."""
    global _gallery_service_instance

    if _gallery_service_instance is None:
        _gallery_service_instance = GalleryService(get_settings().upload)

    return _gallery_service_instance


def reset_gallery_service() -> None:
    """Drop the global instance (used by tests)."""
    global _gallery_service_instance
    _gallery_service_instance = None

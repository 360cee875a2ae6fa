"""Slide class wrapping one standalone HTML slide document."""

from typing import Optional

from deck_gallery.utils.viewport_fitter import fit_to_viewport


class Slide:
    """A single slide held as a complete, independently renderable HTML string.

    Slides are never patched: edits replace the whole document.

    Attributes:
        html: The slide document (or bare fragment for hand-written slides)
        slide_id: Optional unique identifier for this slide
    """

    def __init__(self, html: str, slide_id: Optional[str] = None):
        """Initialize a Slide with HTML content.

        Args:
            html: The slide document
            slide_id: Optional unique identifier for this slide
        """
        self.html = html
        self.slide_id = slide_id

    def to_html(self) -> str:
        """Return the HTML string for this slide."""
        return self.html

    def replace_html(self, html: str) -> None:
        """Replace the slide document wholesale."""
        self.html = html

    def render(self, fit: bool = True) -> str:
        """Return the document to load into a rendering frame.

        Args:
            fit: Inject the fit-to-width scaling script
        """
        return fit_to_viewport(self.html) if fit else self.html

    def __str__(self) -> str:
        """String representation showing slide preview.

        Returns:
            A preview of the slide's HTML content (first 100 characters)
        """
        preview_length = 100
        preview = self.html[:preview_length]
        if len(self.html) > preview_length:
            preview += "..."

        id_str = f" (id: {self.slide_id})" if self.slide_id else ""
        return f"Slide{id_str}: {preview}"

    def __repr__(self) -> str:
        return f"Slide(slide_id={self.slide_id!r}, html_length={len(self.html)})"

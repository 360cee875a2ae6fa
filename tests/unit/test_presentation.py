"""Unit tests for the Presentation domain object."""

import pytest

from deck_gallery.domain import Presentation, PresentationFramework, PrivacyMode, Slide
from deck_gallery.utils.error_handling import ResourceNotFoundError, SlideDeletionError
from deck_gallery.utils.viewport_fitter import FIT_TO_WIDTH_SCRIPT


@pytest.fixture
def presentation():
    """Presentation with three simple slides."""
    return Presentation.from_slide_html(
        id="p1",
        title="Test Deck",
        slide_htmls=["<p>One</p>", "<p>Two</p>", "<p>Three</p>"],
        author_name="Demo User",
        tags=["demo"],
    )


class TestPresentationCreation:

    def test_defaults(self):
        presentation = Presentation(id="x", title="Empty")

        assert presentation.slides == []
        assert presentation.framework is PresentationFramework.CUSTOM
        assert presentation.privacy is PrivacyMode.PUBLIC
        assert presentation.views == 0
        assert presentation.tags == []
        assert presentation.uploaded_at

    def test_from_slide_html_assigns_ids(self, presentation):
        assert [slide.slide_id for slide in presentation] == ["slide_0", "slide_1", "slide_2"]

    def test_enum_values_accepted_as_strings(self):
        presentation = Presentation(id="x", title="t", framework="Reveal.js", privacy="Unlisted")

        assert presentation.framework is PresentationFramework.REVEAL_JS
        assert presentation.privacy is PrivacyMode.UNLISTED

    def test_from_uploads_splits_decks(self, nested_deck):
        presentation = Presentation.from_uploads(
            id="u",
            title="Uploaded",
            files=[("b.html", b"<p>tail</p>"), ("a.html", nested_deck.encode())],
        )

        assert len(presentation) == 4
        assert "First slide" in presentation[0].html
        assert presentation[3].html == "<p>tail</p>"


class TestSlideManipulation:

    def test_get_slide(self, presentation):
        assert presentation.get_slide(1).html == "<p>Two</p>"

    def test_get_slide_out_of_range(self, presentation):
        with pytest.raises(ResourceNotFoundError):
            presentation.get_slide(3)
        with pytest.raises(ResourceNotFoundError):
            presentation.get_slide(-1)

    def test_replace_slide_is_whole_value(self, presentation):
        presentation.replace_slide(0, "<html><body>New</body></html>")

        assert presentation[0].html == "<html><body>New</body></html>"
        assert presentation[1].html == "<p>Two</p>"

    def test_insert_and_append(self, presentation):
        presentation.insert_slide(Slide("<p>Zero</p>"), 0)
        presentation.append_slide(Slide("<p>Four</p>"))

        assert [s.html for s in presentation] == [
            "<p>Zero</p>", "<p>One</p>", "<p>Two</p>", "<p>Three</p>", "<p>Four</p>",
        ]

    def test_remove_slide(self, presentation):
        removed = presentation.remove_slide(1)

        assert removed.html == "<p>Two</p>"
        assert [s.html for s in presentation] == ["<p>One</p>", "<p>Three</p>"]

    def test_cannot_remove_last_slide(self):
        presentation = Presentation.from_slide_html("p", "t", ["<p>only</p>"])

        with pytest.raises(SlideDeletionError):
            presentation.remove_slide(0)
        assert len(presentation) == 1

    def test_move_slide(self, presentation):
        presentation.move_slide(0, 2)

        assert [s.html for s in presentation] == ["<p>Two</p>", "<p>Three</p>", "<p>One</p>"]

    def test_render_slide(self, presentation):
        assert FIT_TO_WIDTH_SCRIPT in presentation.render_slide(0)
        assert presentation.render_slide(0, fit=False) == "<p>One</p>"

    def test_record_view(self, presentation):
        assert presentation.record_view() == 1
        assert presentation.record_view() == 2


class TestSerialization:

    def test_summary_has_no_slide_content(self, presentation):
        summary = presentation.summary()

        assert summary["slide_count"] == 3
        assert summary["framework"] == "Custom HTML"
        assert summary["privacy"] == "Public"
        assert "slides" not in summary

    def test_to_dict(self, presentation):
        data = presentation.to_dict()

        assert data["id"] == "p1"
        assert data["tags"] == ["demo"]
        assert data["slides"][2] == {"index": 2, "html": "<p>Three</p>", "slide_id": "slide_2"}

    def test_str(self, presentation):
        assert str(presentation) == "Presentation(title='Test Deck', slides=3)"

"""Unit tests for Slide class."""

from deck_gallery.domain.slide import Slide
from deck_gallery.utils.viewport_fitter import FIT_TO_WIDTH_SCRIPT


class TestSlideCreation:
    """Test slide creation and initialization."""

    def test_create_slide_with_html(self):
        html = "<!DOCTYPE html><html><body><h1>Test</h1></body></html>"
        slide = Slide(html=html)

        assert slide.html == html
        assert slide.slide_id is None

    def test_create_slide_with_id(self):
        slide = Slide(html="<h1>Test</h1>", slide_id="slide_1")

        assert slide.slide_id == "slide_1"


class TestSlideOperations:
    """Whole-value read/replace, rendering and cloning."""

    def test_to_html(self):
        html = "<html><body><h1>Test Content</h1></body></html>"
        assert Slide(html=html).to_html() == html

    def test_replace_html(self):
        slide = Slide(html="<p>old</p>", slide_id="s")

        slide.replace_html("<p>new</p>")

        assert slide.to_html() == "<p>new</p>"
        assert slide.slide_id == "s"

    def test_render_fits_by_default(self):
        slide = Slide(html="<html><body>x</body></html>")

        rendered = slide.render()

        assert FIT_TO_WIDTH_SCRIPT in rendered
        assert slide.html == "<html><body>x</body></html>"

    def test_render_without_fit(self):
        slide = Slide(html="<p>x</p>")
        assert slide.render(fit=False) == "<p>x</p>"


class TestSlideStringRepresentation:

    def test_str_truncates_long_html(self):
        slide = Slide(html="<p>" + "x" * 200 + "</p>", slide_id="long")

        text = str(slide)

        assert text.startswith("Slide (id: long): ")
        assert text.endswith("...")

    def test_repr(self):
        assert repr(Slide(html="abc", slide_id="s1")) == "Slide(slide_id='s1', html_length=3)"

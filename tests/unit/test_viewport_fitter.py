"""Tests for the fit-to-width script injection."""

import pytest

from deck_gallery.utils.deck_splitter import split_deck
from deck_gallery.utils.viewport_fitter import (
    FIT_TO_WIDTH_SCRIPT,
    WIDTH_TOLERANCE_PX,
    compute_scale,
    fit_to_viewport,
)


def test_script_inserted_before_closing_body():
    html = "<!DOCTYPE html><html><body><h1>Hi</h1></body></html>"

    result = fit_to_viewport(html)

    assert result == f"<!DOCTYPE html><html><body><h1>Hi</h1>{FIT_TO_WIDTH_SCRIPT}</body></html>"


def test_only_first_closing_body_used():
    html = "<body>a</body><body>b</body>"

    result = fit_to_viewport(html)

    assert result.count(FIT_TO_WIDTH_SCRIPT) == 1
    assert result.index(FIT_TO_WIDTH_SCRIPT) < result.index("b</body>")


def test_fragment_wrapped_in_minimal_document():
    fragment = '<div class="card">Fragment</div>'

    result = fit_to_viewport(fragment)

    assert "<!DOCTYPE html>" in result
    assert '<meta name="viewport" content="width=device-width, initial-scale=1.0">' in result
    assert "body { font-family: system-ui, sans-serif; }" in result
    assert result.index(fragment) < result.index(FIT_TO_WIDTH_SCRIPT) < result.index("</body>")


def test_script_behaviour_text_preserved():
    assert "body.style.width = 'fit-content';" in FIT_TO_WIDTH_SCRIPT
    assert "body.style.minWidth = '100%';" in FIT_TO_WIDTH_SCRIPT
    assert "Math.abs(contentWidth - viewportWidth) > 2" in FIT_TO_WIDTH_SCRIPT
    assert "body.style.transformOrigin = '0 0';" in FIT_TO_WIDTH_SCRIPT
    assert "html.style.overflowX = 'hidden';" in FIT_TO_WIDTH_SCRIPT
    assert "window.addEventListener('resize', fitToWidth);" in FIT_TO_WIDTH_SCRIPT
    assert "window.addEventListener('load', fitToWidth);" in FIT_TO_WIDTH_SCRIPT
    assert "setTimeout(fitToWidth, 0);" in FIT_TO_WIDTH_SCRIPT
    assert "setInterval(fitToWidth, 1000);" in FIT_TO_WIDTH_SCRIPT


def test_fitting_twice_inserts_script_twice():
    html = "<html><body><p>x</p></body></html>"

    twice = fit_to_viewport(fit_to_viewport(html))

    assert twice.count(FIT_TO_WIDTH_SCRIPT) == 2
    assert twice.startswith("<html><body><p>x</p>")


def test_fitting_a_fitted_fragment_wraps_it_once():
    fragment = "<p>Fragment</p>"

    twice = fit_to_viewport(fit_to_viewport(fragment))

    assert twice.count("<!DOCTYPE html>") == 1
    assert twice.count(fragment) == 1
    assert twice.count(FIT_TO_WIDTH_SCRIPT) == 2
    closing_body = twice.index("</body>")
    assert twice.rindex(FIT_TO_WIDTH_SCRIPT) < closing_body
    assert twice.index(fragment) < twice.index(FIT_TO_WIDTH_SCRIPT)


def test_fits_isolated_deck_slides(three_slide_deck):
    for slide in split_deck(three_slide_deck):
        fitted = fit_to_viewport(slide)
        assert fitted.index("window.Reveal") < fitted.index("fitToWidth") < fitted.index("</body>")


class TestComputeScale:
    """The decision rule the injected script applies."""

    @pytest.mark.parametrize("viewport, content", [
        (1024, 1024),
        (1024, 1025),
        (1024, 1026),
        (1024, 1022),
    ])
    def test_within_tolerance_left_unscaled(self, viewport, content):
        assert compute_scale(viewport, content) is None

    def test_wider_content_scaled_down(self):
        assert compute_scale(800, 1600) == pytest.approx(0.5)

    def test_narrower_content_scaled_up(self):
        assert compute_scale(1200, 600) == pytest.approx(2.0)

    def test_zero_width_content_left_unscaled(self):
        assert compute_scale(1024, 0) is None

    def test_default_tolerance(self):
        assert WIDTH_TOLERANCE_PX == 2.0
        assert compute_scale(100, 102.5) == pytest.approx(100 / 102.5)

    def test_transform_cleared_before_measuring(self):
        reset = FIT_TO_WIDTH_SCRIPT.index("body.style.transform = '';")
        measure = FIT_TO_WIDTH_SCRIPT.index("var contentWidth = body.scrollWidth;")
        assert reset < measure

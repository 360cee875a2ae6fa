"""Inject a fit-to-width scaling script into slide documents.

Slides are authored at arbitrary widths. The injected script measures the
natural width of the body inside the rendering frame and scales it so the
slide fills the viewport horizontally without overflow.
"""

from typing import Optional

WIDTH_TOLERANCE_PX = 2.0

FIT_TO_WIDTH_SCRIPT = """
      <script>
        (function() {
          function fitToWidth() {
            var body = document.body;
            var html = document.documentElement;

            // Reset to measure
            body.style.width = 'fit-content';
            body.style.minWidth = '100%'; // Ensure it fills at least the screen for small text
            body.style.transform = '';
            body.style.margin = '0'; // Reset margin for calculation

            var viewportWidth = window.innerWidth;
            var contentWidth = body.scrollWidth;

            // Tolerance of 2px for float precision
            if (contentWidth > 0 && Math.abs(contentWidth - viewportWidth) > 2) {
               var scale = viewportWidth / contentWidth;
               body.style.transformOrigin = '0 0';
               body.style.transform = 'scale(' + scale + ')';

               // Unscaled width would otherwise still produce scrollbars
               body.style.overflowX = 'hidden';
               html.style.overflowX = 'hidden';
            }
          }

          window.addEventListener('resize', fitToWidth);
          window.addEventListener('load', fitToWidth);
          // Run immediately in case load already fired
          setTimeout(fitToWidth, 0);
          // Run periodically for dynamic content
          setInterval(fitToWidth, 1000);
        })();
      </script>
    """

FRAGMENT_TEMPLATE = """
        <!DOCTYPE html>
        <html>
        <head>
          <meta name="viewport" content="width=device-width, initial-scale=1.0">
          <style>
            body {{ font-family: system-ui, sans-serif; }}
          </style>
        </head>
        <body>
          {fragment}
          {script}
        </body>
        </html>
      """


def fit_to_viewport(slide_html: str) -> str:
    """Return ``slide_html`` with the fit-to-width script injected.

    The script goes immediately before the first ``</body>``. Input without a
    closing body tag is treated as a fragment and wrapped in a minimal
    document.

    Args:
        slide_html: Complete slide document or bare HTML fragment

    Returns:
        New document string
    """
    if "</body>" in slide_html:
        return slide_html.replace("</body>", f"{FIT_TO_WIDTH_SCRIPT}</body>", 1)

    return FRAGMENT_TEMPLATE.format(fragment=slide_html, script=FIT_TO_WIDTH_SCRIPT)


def compute_scale(
    viewport_width: float,
    content_width: float,
    tolerance: float = WIDTH_TOLERANCE_PX,
) -> Optional[float]:
    """Mirror of the injected script's decision rule.

    Returns:
        The scale factor the script would apply, or None when it leaves the
        content unscaled
    """
    if content_width <= 0 or abs(content_width - viewport_width) <= tolerance:
        return None
    return viewport_width / content_width

"""Visual editor injection for slide documents.

The visual editor renders a slide in a frame with its text containers made
editable. After each edit the frame posts a ``SLIDE_UPDATE`` message carrying
the whole document, minus the editor's own style and script, back to the
host, which replaces the slide with it.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Mapping

from bs4 import BeautifulSoup

if TYPE_CHECKING:
    from deck_gallery.domain.presentation import Presentation

logger = logging.getLogger(__name__)

EDITOR_STYLE_ID = "visual-editor-style"
EDITOR_SCRIPT_ID = "visual-editor-script"
SLIDE_UPDATE_MESSAGE = "SLIDE_UPDATE"

VISUAL_EDITOR_SNIPPET = f"""
        <style id="{EDITOR_STYLE_ID}">
          [contenteditable="true"]:hover {{ outline: 2px dashed #6366f1; cursor: text; }}
          [contenteditable="true"]:focus {{ outline: 2px solid #6366f1; background: rgba(99, 102, 241, 0.1); }}
        </style>
        <script id="{EDITOR_SCRIPT_ID}">
          (function() {{
            function makeTextEditable() {{
              const all = document.querySelectorAll('h1, h2, h3, h4, h5, h6, p, span, li, a, td, th, div:not(:has(div))');
              all.forEach(el => {{
                 // Only elements with their own text
                 const hasText = Array.from(el.childNodes).some(n => n.nodeType === 3 && n.textContent.trim().length > 0);
                 if (hasText) {{
                   el.contentEditable = "true";
                 }}
              }});
            }}

            makeTextEditable();
            // Retry for dynamic content
            setTimeout(makeTextEditable, 500);

            let timeout;
            const notify = () => {{
               clearTimeout(timeout);
               timeout = setTimeout(() => {{
                  const clone = document.documentElement.cloneNode(true);
                  const s = clone.querySelector('#{EDITOR_SCRIPT_ID}');
                  const st = clone.querySelector('#{EDITOR_STYLE_ID}');
                  if(s) s.remove();
                  if(st) st.remove();

                  window.parent.postMessage({{
                      type: '{SLIDE_UPDATE_MESSAGE}',
                      content: clone.outerHTML
                  }}, '*');
               }}, 300);
            }}

            document.body.addEventListener('input', notify);
            document.body.addEventListener('blur', notify, true);
          }})();
        </script>
      """


def inject_visual_editor(slide_html: str) -> str:
    """Return ``slide_html`` with the visual editor style and script injected."""
    if "</body>" in slide_html:
        return slide_html.replace("</body>", f"{VISUAL_EDITOR_SNIPPET}</body>", 1)
    return f"<!DOCTYPE html><html><body>{slide_html}{VISUAL_EDITOR_SNIPPET}</body></html>"


def strip_visual_editor(slide_html: str) -> str:
    """Remove the visual editor style and script elements, if present."""
    if EDITOR_STYLE_ID not in slide_html and EDITOR_SCRIPT_ID not in slide_html:
        return slide_html

    soup = BeautifulSoup(slide_html, "html.parser")
    for element_id in (EDITOR_SCRIPT_ID, EDITOR_STYLE_ID):
        for element in soup.find_all(id=element_id):
            element.decompose()
    return str(soup)


def apply_editor_message(
    presentation: "Presentation",
    index: int,
    message: Mapping[str, Any],
) -> bool:
    """Apply a message posted by the visual editor frame to a slide.

    Only ``SLIDE_UPDATE`` messages are handled; their content replaces the
    slide at ``index`` wholesale.

    Args:
        presentation: Presentation being edited
        index: Index of the slide shown in the editor
        message: Message payload posted by the frame

    Returns:
        True if the slide content changed
    """
    if message.get("type") != SLIDE_UPDATE_MESSAGE:
        return False

    content = message.get("content")
    if not isinstance(content, str):
        logger.warning("Ignoring editor message without string content", extra={"slide_index": index})
        return False

    content = strip_visual_editor(content)
    if presentation.get_slide(index).html == content:
        return False

    presentation.replace_slide(index, content)
    logger.info("Applied visual editor update", extra={"slide_index": index})
    return True

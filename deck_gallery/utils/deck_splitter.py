"""Split uploaded Reveal.js decks into standalone, isolated slide documents.

A Reveal.js deck nests its slides as ``.reveal > .slides > section``, where a
section may itself hold child sections (vertical slides). Each leaf section
is re-wrapped into its own complete HTML document that keeps the deck's head
markup and container attributes but renders without the Reveal runtime.

Anything that is not a recognizable deck is passed through untouched as a
single slide.
"""

from __future__ import annotations

import html
import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple, Union

from bs4 import BeautifulSoup, Tag

logger = logging.getLogger(__name__)

ROOT_CONTAINER_SELECTOR = ".reveal"
SEQUENCE_CONTAINER_SELECTOR = ".reveal .slides"
SLIDE_TAG = "section"
HEAD_CONTENT_TAGS = frozenset(
    {"base", "link", "meta", "noscript", "script", "style", "template", "title"}
)

ISOLATION_STYLE = """<style>
    /* Injected to keep an isolated Reveal.js slide visible without its runtime */
    html, body { height: 100%; margin: 0; overflow: hidden; }
    .reveal { height: 100% !important; width: 100% !important; }
    .reveal .slides {
        height: 100% !important;
        width: 100% !important;
        display: flex !important;
        align-items: center;
        justify-content: center;
        transform: none !important;
        text-align: center;
        pointer-events: none;
    }
    .reveal .slides section {
        display: block !important;
        opacity: 1 !important;
        visibility: visible !important;
        transform: none !important;
        pointer-events: auto !important;
        max-width: 100%;
        max-height: 100%;
        margin: auto;
    }
</style>"""

RUNTIME_STUB_SCRIPT = """<script>
    // Reveal is not running in an isolated slide; stub the entry points it may be driven through
    window.Reveal = { initialize: () => {}, isReady: () => true, layout: () => {} };
  </script>"""


@dataclass(frozen=True)
class ExtractionContext:
    """Deck-level markup needed to rebuild each slide in isolation.

    Attributes:
        html_attrs: Serialized attributes of the root <html> element
        body_attrs: Serialized attributes of <body>
        reveal_attrs: Serialized attributes of the .reveal container
        slides_attrs: Serialized attributes of the .slides container
        head_content: Verbatim inner markup of <head>
    """

    html_attrs: str = ""
    body_attrs: str = ""
    reveal_attrs: str = ""
    slides_attrs: str = ""
    head_content: str = ""


def serialize_attrs(element: Optional[Tag]) -> str:
    """Serialize an element's attributes as ``name="value"`` pairs."""
    if element is None:
        return ""

    parts = []
    for name, value in element.attrs.items():
        if isinstance(value, (list, tuple)):
            value = " ".join(value)
        elif value is None:
            value = ""
        parts.append(f'{name}="{html.escape(str(value), quote=True)}"')
    return " ".join(parts)


def _open_tag(tag_name: str, attrs: str) -> str:
    return f"<{tag_name} {attrs}>" if attrs else f"<{tag_name}>"


def _head_markup(soup: BeautifulSoup) -> str:
    if soup.head is not None:
        return soup.head.decode_contents()

    # <head> start tag omitted: leading metadata elements still belong to the head
    container = soup.html if soup.html is not None else soup
    parts = []
    for child in container.children:
        if not isinstance(child, Tag):
            continue
        if child.name not in HEAD_CONTENT_TAGS:
            break
        parts.append(str(child))
    return "\n".join(parts)


def extract_context(soup: BeautifulSoup, reveal: Tag, slides: Tag) -> ExtractionContext:
    """Capture the attributes and head markup shared by every slide of a deck."""
    return ExtractionContext(
        html_attrs=serialize_attrs(soup.html),
        body_attrs=serialize_attrs(soup.body),
        reveal_attrs=serialize_attrs(reveal),
        slides_attrs=serialize_attrs(slides),
        head_content=_head_markup(soup),
    )


def _child_sections(element: Tag) -> List[Tag]:
    return list(element.find_all(SLIDE_TAG, recursive=False))


def flatten_sections(element: Tag) -> List[Tag]:
    """Return the leaf sections under ``element`` in depth-first document order.

    A section with nested sections is treated purely as a container: only its
    descendants are returned, any other content it holds is not.
    """
    children = _child_sections(element)
    if not children:
        return [element]

    leaves: List[Tag] = []
    for child in children:
        leaves.extend(flatten_sections(child))
    return leaves


def build_isolated_slide(section: Tag, context: ExtractionContext) -> str:
    """Wrap a single leaf section into a standalone HTML document."""
    return f"""<!DOCTYPE html>
{_open_tag("html", context.html_attrs)}
<head>
{context.head_content}
{ISOLATION_STYLE}
</head>
{_open_tag("body", context.body_attrs)}
  {_open_tag("div", context.reveal_attrs)}
    {_open_tag("div", context.slides_attrs)}
      {section}
    </div>
  </div>
  {RUNTIME_STUB_SCRIPT}
</body>
</html>"""


def _extract_slides(source_html: str) -> List[str]:
    soup = BeautifulSoup(source_html, "html.parser")

    reveal = soup.select_one(ROOT_CONTAINER_SELECTOR)
    slides = soup.select_one(SEQUENCE_CONTAINER_SELECTOR)
    if reveal is None or slides is None:
        return []

    sections = _child_sections(slides)
    if not sections:
        return []

    context = extract_context(soup, reveal, slides)
    extracted: List[str] = []
    for section in sections:
        for leaf in flatten_sections(section):
            extracted.append(build_isolated_slide(leaf, context))
    return extracted


def split_deck(source_html: str) -> List[str]:
    """Split an HTML document into one standalone document per slide.

    Never raises. Input that is not a full HTML document, is not a Reveal.js
    deck, or fails to parse is returned as a single slide.

    Args:
        source_html: Raw text of an uploaded HTML file

    Returns:
        Ordered list of complete HTML documents, at least one element long
    """
    if "<html" not in source_html and "<!DOCTYPE" not in source_html:
        return [source_html]

    try:
        extracted = _extract_slides(source_html)
    except Exception as e:
        logger.warning(f"Error parsing HTML for slides: {e}", exc_info=True)
        return [source_html]

    if not extracted:
        return [source_html]

    logger.debug("Split deck into isolated slides", extra={"slide_count": len(extracted)})
    return extracted


def decode_upload(content: Union[bytes, str]) -> str:
    """Decode uploaded file content as UTF-8 text."""
    if isinstance(content, bytes):
        return content.decode("utf-8", errors="replace")
    return content


def split_uploads(files: Iterable[Tuple[str, Union[bytes, str]]]) -> List[str]:
    """Split several uploaded files into one ordered list of slides.

    Files are processed in case-insensitive file name order; the slides of
    each file follow those of the previous one.

    Args:
        files: (filename, content) pairs

    Returns:
        All slides of all files, in order
    """
    slides: List[str] = []
    for filename, content in sorted(files, key=lambda item: (item[0].casefold(), item[0])):
        file_slides = split_deck(decode_upload(content))
        logger.info(
            "Processed uploaded file",
            extra={"upload_filename": filename, "slide_count": len(file_slides)},
        )
        slides.extend(file_slides)
    return slides

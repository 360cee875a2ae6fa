"""Export a presentation as a single self-contained HTML player file.

The player embeds every slide document as a JSON array and shows one at a
time in an iframe, scaling each to the window width the same way the
in-app player does.
"""

import html
import json
import logging
import re

from deck_gallery.domain.presentation import Presentation

logger = logging.getLogger(__name__)

_UNSAFE_FILENAME_CHARS = re.compile(r"[^a-z0-9]", re.IGNORECASE)

PLAYER_STYLE = """
        body, html { margin: 0; padding: 0; width: 100%; height: 100%; overflow: hidden; background: #000; font-family: system-ui, -apple-system, sans-serif; }
        iframe { width: 100%; height: 100%; border: none; background: white; transition: opacity 0.2s; }

        .controls {
            position: fixed;
            bottom: 20px;
            left: 50%;
            transform: translateX(-50%);
            background: rgba(15, 23, 42, 0.8);
            backdrop-filter: blur(8px);
            padding: 8px 16px;
            border-radius: 9999px;
            display: flex;
            align-items: center;
            gap: 16px;
            opacity: 0;
            transition: opacity 0.3s;
            box-shadow: 0 10px 15px -3px rgba(0, 0, 0, 0.5);
            border: 1px solid rgba(255, 255, 255, 0.1);
        }

        body:hover .controls, .controls:focus-within { opacity: 1; }

        button {
            background: rgba(255,255,255,0.1);
            border: none;
            color: white;
            padding: 8px 12px;
            border-radius: 6px;
            cursor: pointer;
            font-size: 14px;
            font-weight: 500;
            transition: all 0.2s;
        }

        button:hover { background: rgba(255,255,255,0.2); transform: translateY(-1px); }
        button:active { transform: translateY(0); }
        button:disabled { opacity: 0.3; cursor: not-allowed; transform: none; }

        .counter { font-variant-numeric: tabular-nums; color: #94a3b8; font-size: 14px; }
"""

# Runs inside the exported file, so the fit script is built client-side per slide.
PLAYER_SCRIPT = r"""
        let currentIndex = 0;
        const frame = document.getElementById('slideFrame');
        const counter = document.getElementById('counter');
        const prevBtn = document.getElementById('prevBtn');
        const nextBtn = document.getElementById('nextBtn');

        function loadSlide(index) {
            let content = slides[index];
            const scaleScript = `<script>
                (function() {
                  function fitToWidth() {
                    var body = document.body;
                    var html = document.documentElement;
                    body.style.width = 'fit-content';
                    body.style.minWidth = '100%';
                    body.style.transform = '';
                    body.style.margin = '0';
                    var viewportWidth = window.innerWidth;
                    var contentWidth = body.scrollWidth;
                    if (contentWidth > 0 && Math.abs(contentWidth - viewportWidth) > 2) {
                       var scale = viewportWidth / contentWidth;
                       body.style.transformOrigin = '0 0';
                       body.style.transform = 'scale(' + scale + ')';
                       body.style.overflowX = 'hidden';
                       html.style.overflowX = 'hidden';
                    }
                  }
                  window.addEventListener('resize', fitToWidth);
                  window.addEventListener('load', fitToWidth);
                  setTimeout(fitToWidth, 0);
                })();
            <\/script>`;

            if (content.toLowerCase().includes('<body')) {
                if (content.includes('</body>')) {
                    content = content.replace('</body>', scaleScript + '</body>');
                } else {
                    content = content + scaleScript;
                }
            } else {
                 content = '<!DOCTYPE html><html><head><meta name="viewport" content="width=device-width, initial-scale=1.0"><style>body{font-family:system-ui,sans-serif;}</style></head><body>' + content + scaleScript + '</body></html>';
            }

            frame.style.opacity = '0';
            setTimeout(() => {
                frame.srcdoc = content;
                frame.onload = () => { frame.style.opacity = '1'; };
                counter.innerText = (index + 1) + ' / ' + slides.length;
                prevBtn.disabled = index === 0;
                nextBtn.disabled = index === slides.length - 1;
            }, 100);
        }

        function nextSlide() {
            if (currentIndex < slides.length - 1) {
                currentIndex++;
                loadSlide(currentIndex);
            }
        }

        function prevSlide() {
            if (currentIndex > 0) {
                currentIndex--;
                loadSlide(currentIndex);
            }
        }

        document.addEventListener('keydown', (e) => {
            if (e.key === 'ArrowRight' || e.key === 'Space') nextSlide();
            if (e.key === 'ArrowLeft') prevSlide();
        });

        loadSlide(0);
"""


def embed_slides_json(slides: list[str]) -> str:
    """Serialize slide documents for embedding inside an inline <script>."""
    return json.dumps(slides).replace("</script", "<\\/script")


def build_player_html(presentation: Presentation) -> str:
    """Build the standalone player document for a presentation.

    Args:
        presentation: Presentation to export

    Returns:
        Complete HTML document with all slides embedded
    """
    slides_data = embed_slides_json([slide.to_html() for slide in presentation])
    title = html.escape(presentation.title)

    logger.info(
        "Exporting presentation player",
        extra={"presentation_id": presentation.id, "slide_count": len(presentation)},
    )

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{title} - HTML Player</title>
    <style>{PLAYER_STYLE}    </style>
</head>
<body>
    <iframe id="slideFrame"></iframe>
    <div class="controls" id="controls">
        <button id="prevBtn" onclick="prevSlide()">Previous</button>
        <span class="counter" id="counter"></span>
        <button id="nextBtn" onclick="nextSlide()">Next</button>
    </div>

    <script>
        const slides = {slides_data};{PLAYER_SCRIPT}    </script>
</body>
</html>"""


def player_filename(title: str) -> str:
    """Download file name for an exported player."""
    return f"{_UNSAFE_FILENAME_CHARS.sub('_', title).lower()}_presentation.html"

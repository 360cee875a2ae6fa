"""Gallery and export services."""

from deck_gallery.services.gallery_service import GalleryService, build_cover_slide, get_gallery_service
from deck_gallery.services.player_export import build_player_html, player_filename

__all__ = [
    "GalleryService",
    "build_cover_slide",
    "build_player_html",
    "get_gallery_service",
    "player_filename",
]

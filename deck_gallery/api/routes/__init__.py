"""API routers."""

from deck_gallery.api.routes import presentations

__all__ = ["presentations"]

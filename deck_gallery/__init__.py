"""HTML deck gallery: split, isolate, fit, edit and export HTML slide decks."""

__version__ = "0.1.0"

"""HTTP API for the deck gallery."""

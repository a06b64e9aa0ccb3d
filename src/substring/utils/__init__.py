"""Low-level helpers for working with encoded text."""

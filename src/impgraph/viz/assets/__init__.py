"""Bundled browser assets for the registry graph page."""

"""Bundled page template and static assets."""

"""Generates release notes from git history and renders them as a web page."""

"""Utility functions and helpers for release notes management."""

"""Standalone HTTP functions deployed separately from the API."""

"""Textual UI for the task board."""

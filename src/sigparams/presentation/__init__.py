"""Presentation layer: declaration API and pytest plugin."""

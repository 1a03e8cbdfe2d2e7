"""Presentation layer: integrations with test runners."""

"""Suggestion services."""

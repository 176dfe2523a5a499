"""Commit type and message helpers."""

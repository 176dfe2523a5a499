"""Git repository operations."""

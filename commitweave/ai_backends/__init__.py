"""AI commit suggestion providers."""

"""Application layer for tidyfs."""

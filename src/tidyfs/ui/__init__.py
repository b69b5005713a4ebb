"""User interfaces for tidyfs."""

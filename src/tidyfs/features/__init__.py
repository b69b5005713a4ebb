"""Feature packages: tree analysis and collision-safe naming."""

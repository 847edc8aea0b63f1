"""Use cases for booking cargo."""

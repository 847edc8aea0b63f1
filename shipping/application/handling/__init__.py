"""Use cases for registering handling events."""

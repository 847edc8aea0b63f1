"""HTTP interface for reporting handling events."""

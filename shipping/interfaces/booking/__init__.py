"""HTTP interface for booking, routing and listing cargo."""

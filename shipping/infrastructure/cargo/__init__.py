"""
Infrastructure adapters for the cargo bounded context.

Each adapter implements a domain port (ABC).
"""

"""
Application layer package.

Use cases translate commands into domain service calls and wrap the
outcome in result envelopes.
"""

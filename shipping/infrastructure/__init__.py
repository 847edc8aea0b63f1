"""
Infrastructure layer package.

Adapters implementing domain ports.
"""

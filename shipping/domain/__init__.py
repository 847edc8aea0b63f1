"""
Domain layer package.

Contains business rules: entities, value objects, domain services,
and port interfaces. No framework imports, no IO.
"""

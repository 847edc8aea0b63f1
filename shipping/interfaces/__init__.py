"""
Interfaces layer package.

Operation tables, command decoders, response schemas and the HTTP
dispatch that ties them to FastAPI. No business logic belongs here.
"""

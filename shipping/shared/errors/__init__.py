"""
Shared error handling package.

Centralizes error-to-HTTP mapping so that every failure, whether raised
while decoding a request or carried back from a domain service, is
reported through one encoder.
"""

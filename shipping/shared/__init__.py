"""
Shared module package.

Contains cross-cutting concerns used across bounded contexts:
- Error classification and encoding
- Security middleware
- Rate limiting
- Logging configuration
"""

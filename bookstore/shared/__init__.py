"""
Shared module package.

Contains cross-cutting concerns used across bounded contexts:
- Error responders
- Security middleware
- Rate limiting
- Logging configuration
"""

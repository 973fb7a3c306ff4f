"""
Shared module package.

Contains cross-cutting concerns:
- Error handling and mapping
- Security headers
- Rate limiting
- Logging configuration
"""

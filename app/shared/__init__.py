"""
Shared module package.

Contains cross-cutting concerns used by the file server:
- Error classification and the error-classifying wrapper
- Security middleware
- Rate limiting
- Logging configuration
"""

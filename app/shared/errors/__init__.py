"""
Shared error handling package.

Centralizes error-to-HTTP mapping so that handler failures
are consistently translated into plain-text responses.
"""

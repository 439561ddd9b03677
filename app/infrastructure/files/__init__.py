"""
Infrastructure adapters for the files bounded context.

Implements the FileReader port against the local filesystem.
"""

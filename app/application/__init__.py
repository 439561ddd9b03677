"""
Application layer package.

Contains the use case that resolves a request path to file content.
Each use case is a single class with one public method.
This layer depends on domain ports, never on infrastructure.
"""

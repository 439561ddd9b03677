"""
Domain layer package.

Contains the file-listing error vocabulary and the port interfaces
the application layer depends on. No framework imports, no IO.
"""

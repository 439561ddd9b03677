"""
Application layer for the files bounded context.

Use cases coordinate domain errors and ports to fulfill
file listing requests. No framework or infrastructure imports allowed.
"""

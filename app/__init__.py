"""
FileList — a minimal HTTP file-listing server.

Application package root, laid out as ports & adapters:
    - domain: Error vocabulary and the FileReader port.
    - application: The read-file use case and its DTOs.
    - infrastructure: Local filesystem adapter.
    - interfaces: FastAPI router and dependencies.
    - shared: Cross-cutting concerns (error wrapping, security, logging).
"""

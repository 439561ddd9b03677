"""
Files bounded context — domain layer.

Errors raised while resolving a request path to file content,
and the FileReader port.
"""

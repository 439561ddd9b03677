"""
Files bounded context — interface layer.

FastAPI router and dependency providers for the file listing route.
"""

"""
Interfaces layer package.

Contains the FastAPI router and its dependencies.
No business logic belongs here.
Routes call use cases and return responses.
"""

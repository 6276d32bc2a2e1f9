"""
Web front end: FastAPI routers, request dependencies and Jinja2 templates.
"""

from .app import create_app, main

__all__ = ["create_app", "main"]

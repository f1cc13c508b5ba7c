"""
Auth API package.

Contains the registration and login routes.
"""

from account_auth.api.auth.routes import router

__all__ = ["router"]

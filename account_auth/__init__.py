"""account-auth: account registration and login service."""

__version__ = "0.1.0"

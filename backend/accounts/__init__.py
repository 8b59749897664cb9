"""Accounts: user management over the UserV1 RPC interface."""

__version__ = "0.1.0"

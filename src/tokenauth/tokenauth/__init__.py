# ABOUTME: Token authentication package initialization
# ABOUTME: Provides signed, compressed bearer tokens for the authentication layer

"""
Token authentication package.

This package mints, refreshes, inspects and validates compact signed bearer
tokens (HMAC-signed, DEFLATE-compressed JWTs) carrying a username, a password
placeholder and a creation timestamp. HTTP handling, user storage and
authorization checks belong to the host service.
"""

__version__ = "0.1.0"

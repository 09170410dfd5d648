"""
Shared security, middleware and rate-limit utilities.
"""

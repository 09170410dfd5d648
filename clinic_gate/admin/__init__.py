"""
Administrator endpoints.
"""

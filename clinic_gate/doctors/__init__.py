"""
Doctor profiles and doctor-facing endpoints.
"""

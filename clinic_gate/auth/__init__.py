"""
Authentication module for the clinic system.

This module provides:
- Bearer token verification and account resolution
- Role guards for admins and patients
- Verified-doctor authorization
- Optional identity resolution for public routes
"""

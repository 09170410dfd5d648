"""
Patient-facing endpoints.
"""

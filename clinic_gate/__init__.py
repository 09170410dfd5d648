"""
Clinic Gate: authentication and authorization for the clinic appointment API.
"""

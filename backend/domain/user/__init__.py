"""User domain module.

This domain manages user identity and password credentials. Sessions live
in their own domain and reference users by id.
"""

"""Session domain module.

Bearer-token sessions proving a previous successful login.
"""

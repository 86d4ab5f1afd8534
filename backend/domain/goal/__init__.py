"""Goal domain module.

Target weights with a deadline, one active goal per user by policy.
"""

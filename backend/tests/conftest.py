"""Shared test configuration.

Loads backend/.env.test before any test module is imported. Values already
present in the process environment win, so the MongoDB integration tests run
with:

    REPOSITORY_BACKEND=mongodb MONGODB_URI=mongodb://localhost:27017 pytest
"""

from infrastructure.config import load_environment

load_environment(".env.test")

"""Unit test configuration.

Unit tests run against in-memory repositories and mocked MongoDB
collections; they never need a database.
"""

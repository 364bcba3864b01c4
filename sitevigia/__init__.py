"""Record types, SQL queries, request validation, password hashing and services for a website monitoring backend."""

__version__ = "0.1.0"
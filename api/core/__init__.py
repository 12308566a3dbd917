"""
Shared, cross-cutting code for the API.

`core/` holds the small building blocks both features use (DB wiring,
settings, logging, the error taxonomy). Keep feature-specific SQL and
validation in the corresponding feature package (`accounts/`, `messages/`).
"""

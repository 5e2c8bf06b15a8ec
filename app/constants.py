"""Shared constants used across the application."""

# Field limits for account registration and login payloads
NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 20
EMAIL_MAX_LENGTH = 100
PASSWORD_MIN_LENGTH = 6

TOKEN_TYPE_ACCESS = "access"

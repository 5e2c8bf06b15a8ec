"""User authentication service."""

"""Install and manage Claude agent definitions."""

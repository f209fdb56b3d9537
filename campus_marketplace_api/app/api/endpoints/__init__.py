"""Domain-specific routers (users, messages)."""

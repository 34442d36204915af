"""Event registration management backend."""

"""Service layer — the public date-time and range operations."""

"""Storage implementations backed by SQLModel."""

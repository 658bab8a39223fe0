"""In-memory infrastructure backing the domain protocols."""

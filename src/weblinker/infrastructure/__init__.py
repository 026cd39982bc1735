"""Infrastructure layer — in-memory storage for the page graph."""

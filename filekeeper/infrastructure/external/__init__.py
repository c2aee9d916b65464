"""External collaborators (object storage)."""

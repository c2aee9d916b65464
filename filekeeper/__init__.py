"""Filekeeper: store uploaded files by id (metadata in SQL, bytes in a storage backend)."""

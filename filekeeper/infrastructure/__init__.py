"""Infrastructure: storage backends, SQL persistence, and their exceptions."""

"""GigWork marketplace backend."""

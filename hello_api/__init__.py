"""Hello World API service."""

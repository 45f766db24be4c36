"""Task Manager API package."""

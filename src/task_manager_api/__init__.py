"""Task Manager API: a REST service for creating, listing, updating and deleting tasks."""

__version__ = "1.0.0"

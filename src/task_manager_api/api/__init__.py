"""HTTP application wiring for the task manager API."""

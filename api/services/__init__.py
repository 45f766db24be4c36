"""Service layer; task operations live in api.services.tasks."""

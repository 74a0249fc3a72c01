"""Task entities, an in-memory repository and a service for managing a list of tasks."""

__version__ = "0.1.0"
__all__ = ["entity", "repository", "dto", "services"]
"""docdedup - owner-scoped duplicate detection and suppression engine."""

__version__ = "0.1.0"

"""Solutions to classic competitive-programming exercises and small data structures."""

__version__ = "0.1.0"

__all__ = ["basics", "constructive", "arithmetic", "containers", "linked_lists"]
"""pairline: anonymous one-to-one matchmaking and signaling relay."""

__version__ = "0.1.0"

__all__ = ["__version__"]

"""Thread-safe NPC tick metrics rendered as Prometheus text."""

__version__ = "0.1.0"
__all__ = ["metrics"]
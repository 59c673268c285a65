"""Read-only HTTP lookup service for dated currency exchange rates."""

__version__ = "0.1.0"

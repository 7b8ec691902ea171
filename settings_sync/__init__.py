"""Settings synchronization for modules controlled by a host process."""

__version__ = "0.3.0"

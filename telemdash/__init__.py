"""Terminal telemetry panel for a running flight simulator."""

__version__ = "0.1.0"

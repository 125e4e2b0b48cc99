"""Attack-origin spreadsheet reports from honeypot search telemetry."""

__version__ = "0.1.0"

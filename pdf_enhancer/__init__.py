"""AI content enhancement and PDF generation service."""

__version__ = "0.1.0"

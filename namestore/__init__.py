"""namestore — a persisted list of names with a live, reactive view."""

__version__ = "0.1.0"

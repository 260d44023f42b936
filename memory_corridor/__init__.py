"""Photo-memory album, gallery corridor model, yearly reports and settings."""

__version__ = "0.1.0"
"""Live AI-news feed engine: rotating ticker and featured selection."""

__version__ = "0.1.0"

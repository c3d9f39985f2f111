"""Drip Agent: social-profile style analysis and lookbook generation."""

__version__ = "1.0.0"

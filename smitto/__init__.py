"""Application building blocks: palettes, key-value records, periodic services and a Telegram bot service."""

__version__ = "0.1.1"
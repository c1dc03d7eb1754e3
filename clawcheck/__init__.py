"""Read-only security check for Clawdbot gateway configurations."""

__version__ = "0.2.0"

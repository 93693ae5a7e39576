"""Tokenline - a shared talking-stick queue per Slack channel."""

__version__ = "0.1.0"

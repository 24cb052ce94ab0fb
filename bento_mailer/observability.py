"""Observability module - wrapper for logging functions."""
from bento_mailer.logger import info, error, warn, debug

# Alias for compatibility
warning = warn

__all__ = ['info', 'error', 'warn', 'warning', 'debug']

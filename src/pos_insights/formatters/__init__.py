"""Output formatting utilities."""

from pos_insights.formatters.console import format_insights_for_console, sanitize_for_console

__all__ = ["format_insights_for_console", "sanitize_for_console"]

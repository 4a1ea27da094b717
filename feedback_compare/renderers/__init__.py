from .report_renderer import ReportRenderer, format_percent

__all__ = ["ReportRenderer", "format_percent"]

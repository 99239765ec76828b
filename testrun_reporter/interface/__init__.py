"""Interactive console interface."""

from .menu import SummaryMenu, open_in_file_browser


__all__ = ["SummaryMenu", "open_in_file_browser"]

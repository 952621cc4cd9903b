"""Daily Summary - turn a day of git commits into a work report."""

__version__ = "0.1.0"

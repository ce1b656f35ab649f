"""Diagnostics package.

Command-line renderings of the view models; each module exposes main(argv).
"""

__all__ = ["pretty_month", "feasts_table"]

"""lotsort — normalize brokerage 1099-B / gain-loss CSV exports."""

__version__ = "0.1.0"

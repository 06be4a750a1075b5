"""carousel - keyboard driven image browser and sorter."""

__version__ = "0.1.0"

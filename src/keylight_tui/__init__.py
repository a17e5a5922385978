"""Terminal controller for an Elgato Key Light."""

__version__ = "1.0.0"
__license__ = "GPL-3.0"

"""tzctl — convert wall-clock times across IANA timezones."""

__version__ = "0.1.0"

"""A 6x6 number-placement puzzle engine with a PyQt6 front end."""
__version__ = "0.1.0"

"""homegame - is there a home game today?"""

__version__ = "0.1.0"

"""EarthBound party member records and their binary save encoding."""

__version__ = "0.1.0"

"""Italian codice fiscale validation and decoding."""

__version__ = "0.1.0"

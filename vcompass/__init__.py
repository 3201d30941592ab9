"""V-Compass: lexical campus question answering."""

__version__ = "0.1.0"

"""Small utilities: word count, file archiver, fixed-width big integers and a life automaton on BMP images."""

__version__ = "0.1.0"
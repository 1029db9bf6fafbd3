"""hue-guess — guess the hex code of a random colour in your terminal."""

__version__ = '0.1.0'

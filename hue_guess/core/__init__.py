"""hue_guess.core — Foundation layer.

Contains the colour value type, shared types, terminal helpers and text
formatting. This module has NO dependencies on hue_guess.game or the CLI.
Only stdlib and numpy are allowed here.
"""

"""Vehicle register: validation, parsing, a table of cars kept in a text file, and a command to print it."""

__version__ = "0.1.0"
__all__ = ["cli", "parsing", "table", "validator", "vehicles"]
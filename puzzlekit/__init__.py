"""Solutions to classic algorithm puzzles on strings, arrays, lists, trees and graphs."""

__version__ = "0.1.0"
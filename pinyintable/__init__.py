"""Table-code input editor, SQLite phrase table, punctuation and English emoji tables."""

__version__ = "0.1.0"
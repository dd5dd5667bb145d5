"""Command-line inspection tool for ansi-escapes."""

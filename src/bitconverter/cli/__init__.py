"""Command-line interface for bitconverter."""

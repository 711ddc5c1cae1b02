"""Command-line front-end: batch compiler and statement sink."""

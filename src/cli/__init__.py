"""CLI (Typer + Rich) de lms-records."""

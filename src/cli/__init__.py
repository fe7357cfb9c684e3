"""CLI (Typer + Rich): presentación y entrada del usuario."""

"""Adaptadores: todo el I/O concreto (HTTP, ficheros)."""

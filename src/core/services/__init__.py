"""Servicios del Core: orquestación sobre contratos (`core.interfaces`)."""

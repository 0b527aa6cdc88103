"""Rotas do relay HTTP."""

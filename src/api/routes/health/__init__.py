"""Rotas de health e readiness."""

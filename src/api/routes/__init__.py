"""Rotas HTTP da API.

Responsabilidades:
- Definir endpoints HTTP (relay, health)
- Validação inicial de request (headers, tamanho)
- Delegação para use_cases
- Respostas HTTP apropriadas

Estrutura:
- routes/relay/: POST / (relay do envelope)
- routes/health/: health checks e readiness

Agregação:
- router.py: registra todos os routers no app principal
- error_handlers.py: conversão global de falhas para JSON
"""

from __future__ import annotations

from api.routes.error_handlers import register_exception_handlers
from api.routes.router import create_api_router

__all__ = ["create_api_router", "register_exception_handlers"]

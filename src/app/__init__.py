"""Núcleo do relay (casos de uso, serviços e infraestrutura).

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- use_cases/: casos de uso (orquestração, sem IO direto)
- services/: serviços puros (headers, body, request outbound)
- domain/: modelos do relay (Envelope, OutboundRequest, RelayResult)
- infra/: implementações concretas de IO (httpx, rate limiter)
- protocols/: contratos/interfaces
- observability/: correlation_id e métricas via logs
- constants/: constantes da aplicação

Padrão: app executa; api adapta; config configura; utils apoia.
"""

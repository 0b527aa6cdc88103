"""Validators: validação de payloads recebidos na borda.

Estrutura:
- relay/: envelope do relay HTTP (url, method, erros de entrada)
"""

__all__: list[str] = []

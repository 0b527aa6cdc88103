"""API: camada de borda HTTP.

Responsabilidades:
- Receber o envelope do chamador
- Validar Content-Type, tamanho, url e method
- Normalizar JSON/XML para o modelo interno (Envelope)
- Converter RelayResult em resposta HTTP

Subpastas:
- middleware/: correlation_id e headers de segurança
- normalizers/: envelope JSON/XML -> Envelope
- validators/: validação de campos e erros de entrada
- routes/: endpoints HTTP (relay, health)

NÃO PODE conter: execução da chamada outbound (fica em app/infra).
"""

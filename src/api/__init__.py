"""API: camada de borda para a Twilio Messages API.

Responsabilidades:
- Validar parâmetros de envio (formato e limites)
- Construir URL e corpo form-urlencoded
- Autenticar (HTTP Basic) e enviar via transporte injetado

Subpastas:
- connectors/: adapter HTTP da Twilio
- payload_builders/: construção de URL e payload
- validators/: validação de parâmetros e limites

NÃO PODE conter: orquestração de use cases nem criação de transporte.
"""

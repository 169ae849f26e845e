"""App: orquestração, casos de uso e infraestrutura do envio de SMS.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- use_cases/: casos de uso (SmsSender)
- infra/: implementações concretas de IO (httpx)
- protocols/: contratos/interfaces e modelos
- observability/: correlation_id
"""

"""API — camada de borda da Bot API do Telegram.

Responsabilidades:
- Receber updates (webhook) e devolver a resposta HTTP
- Normalizar updates brutos para modelos internos
- Invocar métodos remotos (JSON ou multipart)

Subpastas:
- connectors/: remote invoker HTTP, catálogo outbound, response sink
- normalizers/: update bruto → NormalizedEvent
- routes/: endpoints HTTP (webhook, health)

NÃO PODE conter: composição de middlewares, cursor de polling, sessões.
"""

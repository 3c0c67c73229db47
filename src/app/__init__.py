"""App — runtime do bot: despacho, transportes e wiring.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- coordinators/telegram/: composer, contexto, dispatcher, polling e fachada do bot
- protocols/: contratos/interfaces
- sessions/: middleware de sessão em memória
- observability/: correlation_id e métricas via logs estruturados
- constants/: catálogos de tipos de evento e métodos
- domain/: modelos internos (NormalizedEvent)

Padrão: app executa; api adapta; config configura; utils apoia.
"""

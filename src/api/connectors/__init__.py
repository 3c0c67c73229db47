"""Connectors por canal — adapters de borda para APIs externas.

Estrutura:
- telegram/: Telegram Bot API (invoker HTTP, métodos outbound, webhook)

Cada canal tem seu próprio connector, garantindo SRP e isolamento de falhas.
"""

__all__: list[str] = []

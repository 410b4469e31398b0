"""Use cases de relay de notificações."""

from app.use_cases.relay.relay_notification import RelayNotificationUseCase, RelayResult

__all__ = [
    "RelayNotificationUseCase",
    "RelayResult",
]

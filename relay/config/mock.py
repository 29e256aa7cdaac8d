"""Canned automation responses for mock mode.

Each entry pairs case-insensitive regex patterns with the webhook response
body the mock client returns when the user's text matches. The first match
wins; DEFAULT_MOCK_RESPONSE covers everything else.
"""

from __future__ import annotations

from typing import Any

MOCK_RESPONSES: tuple[tuple[tuple[str, ...], dict[str, Any]], ...] = (
    (
        (r"hola", r"buenos días", r"buenas tardes", r"buenas noches", r"\bhi\b", r"hello"),
        {
            "success": True,
            "response": "¡Hola! Soy Yarvis, tu asistente. ¿En qué puedo ayudarte hoy?",
            "show": {"type": "text", "text": "¡Hola! ¿En qué puedo ayudarte?"},
        },
    ),
    (
        (r"qué hora", r"\bhora\b", r"what time"),
        {
            "success": True,
            "response": "Consulta la hora en tu dispositivo, estoy en modo de prueba.",
            "show": {"type": "text", "text": "Modo de prueba"},
        },
    ),
    (
        (r"recuérdame", r"recordar", r"reminder", r"remind me"),
        {
            "success": True,
            "response": "De acuerdo, he creado un recordatorio para ti.",
            "action": "SET_REMINDER",
            "params": {"in_seconds": 3600},
            "show": {"type": "text", "title": "Recordatorio creado", "text": "Te avisaré pronto"},
        },
    ),
    (
        (r"música", r"canción", r"music", r"reproduce"),
        {
            "success": True,
            "response": "Reproduciendo música ahora. Disfruta de la selección.",
            "action": "PLAY_MUSIC",
            "params": {"playlist": "favorites"},
        },
    ),
    (
        (r"adiós", r"adios", r"hasta luego", r"bye", r"chao"),
        {
            "success": True,
            "response": "¡Hasta luego! Fue un placer ayudarte.",
            "endConversation": True,
            "farewell": "¡Hasta luego!",
        },
    ),
)

DEFAULT_MOCK_RESPONSE: dict[str, Any] = {
    "success": True,
    "response": "Entendido. ¿Hay algo más en lo que pueda ayudarte?",
    "show": {"type": "text", "text": "¿Algo más en lo que pueda ayudarte?"},
}

# Notifications from these apps open a system-initiated conversation
MOCK_IMPORTANT_APPS: tuple[str, ...] = ("whatsapp", "telegram", "gmail", "calendar")


__all__ = [
    "MOCK_RESPONSES",
    "DEFAULT_MOCK_RESPONSE",
    "MOCK_IMPORTANT_APPS",
]

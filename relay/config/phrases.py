"""Fixed phrase tables used by the conversation flow.

END_CONVERSATION_PHRASES are matched as raw case-insensitive substrings of
the user's text, so any token that merely contains a phrase ("adiosas",
"byebye") also ends the conversation.
"""

END_CONVERSATION_PHRASES: tuple[str, ...] = (
    "adiós",
    "adios",
    "hasta luego",
    "chao",
    "chau",
    "termina",
    "terminamos",
    "eso es todo",
    "nada más",
    "gracias eso es todo",
    "ya no necesito nada",
    "bye",
    "goodbye",
    "that's all",
)

# Spoken when the user ends the conversation themselves
USER_END_FAREWELL = "Hasta luego, que tengas un buen día."

# Spoken when the sweeper closes an idle conversation
TIMEOUT_FAREWELL = "La conversación se cerró por inactividad."


__all__ = [
    "END_CONVERSATION_PHRASES",
    "USER_END_FAREWELL",
    "TIMEOUT_FAREWELL",
]

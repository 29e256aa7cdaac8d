"""Real-time relay between voice/chat websocket clients and an automation backend.

Subpackages:
    config/    Environment-driven settings and static phrase tables
    handlers/  Connection registry, sessions, password store, websocket handling
    messages/  Inbound events, outbound builders and the message router
    webhook/   Automation backend client (live and mock)
    api/       REST push surface
    runtime/   Startup-built dependency container
"""

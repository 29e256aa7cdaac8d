"""Client event types, outbound builders and the message router.

events.py:
    Typed inbound events and their decoding from JSON objects.

outbound.py:
    Builders for every relay → client event.

intent.py:
    End-of-conversation phrase detection.

router.py:
    MessageRouter: per-event handling and the REST push path.
"""

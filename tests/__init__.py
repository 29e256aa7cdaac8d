"""Test suite for the relay.

Unit tests live under unit/<area>/, end-to-end FastAPI flows under
integration/, shared fakes under support/. live.py is a manual client for a
running server.
"""

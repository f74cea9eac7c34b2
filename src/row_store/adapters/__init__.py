"""Adapters layer - concrete implementations of ports.

Adapters implement the port interfaces:
- Inbound adapters: statement parser, meta-commands, prompt, CLI, REST API
- Outbound adapters: in-memory page store
"""

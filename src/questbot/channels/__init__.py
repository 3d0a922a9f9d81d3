"""Channel implementations for questbot.

This package provides channel adapters that connect turn handlers to
different environments. Each channel holds the inbound activity for a turn
and implements send_activity() for outbound activities:

- ActivityChannel: Bot Framework channels (HTTP response or connector service)
- CliChannel: Command-line interface environments (stdout/stderr)

Channels encapsulate I/O, keeping handlers environment-agnostic.
"""

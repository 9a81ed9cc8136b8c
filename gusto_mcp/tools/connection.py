"""
Connection Tools

Token checks that need no company context.
"""

from __future__ import annotations

from ..endpoints import GustoTool
from ..formatters import EntityKind

CONNECTION_TOOLS: list[GustoTool] = [
    GustoTool(
        name="gusto_test_connection",
        description="Test the connection to the Gusto API and verify credentials.",
        handler=lambda client, p: client.test_connection(),
    ),
    GustoTool(
        name="gusto_get_token_info",
        description="Get information about the current OAuth access token.",
        handler=lambda client, p: client.get_token_info(),
        kind=EntityKind.TOKEN_INFO,
    ),
]

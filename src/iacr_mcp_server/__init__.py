"""
IACR MCP Server
===============

Search, inspect and download papers from the IACR Cryptology ePrint Archive
over the Model Context Protocol.
"""

import asyncio

from . import server

__all__ = ["main", "server"]


def main():
    """Main entry point for the package."""
    asyncio.run(server.main())

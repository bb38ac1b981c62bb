"""Minimal asyncio IRC client used by the weather agent.

Modules:
- message: line parsing and prefix handling
- session: one connected, identified relay session
"""

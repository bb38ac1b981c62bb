"""wttr.in access for the weather agent.

Modules:
- client: async HTTP fetch of the j1 JSON payload
- forecast: typed, defaulted view of that payload
- formatter: IRC-decorated display text
"""

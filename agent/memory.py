from __future__ import annotations

from typing import Dict, Optional


class UserLocationMemory:
    """Last query per nick, kept for the lifetime of the process."""

    def __init__(self):
        self._queries: Dict[str, str] = {}

    def lookup(self, nick: str) -> Optional[str]:
        return self._queries.get(nick)

    def remember(self, nick: str, query: str) -> None:
        self._queries[nick] = query

    def __contains__(self, nick: object) -> bool:
        return nick in self._queries

    def __len__(self) -> int:
        return len(self._queries)

    def __repr__(self) -> str:
        return f"UserLocationMemory({len(self._queries)} nicks)"

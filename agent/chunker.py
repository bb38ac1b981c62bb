from __future__ import annotations

from typing import Iterator

CHUNK_LIMIT = 400


class ReplyChunks:
    """
    Consecutive slices of `text`, each at most `limit` characters.
    Iterating again starts over. Empty text produces no chunks.
    Color codes are not treated specially and may straddle two chunks.
    """

    def __init__(self, text: str, limit: int = CHUNK_LIMIT):
        if limit <= 0:
            raise ValueError(f"chunk limit must be positive, got {limit}")
        self.text = text
        self.limit = limit

    def __iter__(self) -> Iterator[str]:
        for start in range(0, len(self.text), self.limit):
            yield self.text[start:start + self.limit]

    def __len__(self) -> int:
        return -(-len(self.text) // self.limit)


def chunk_reply(text: str, limit: int = CHUNK_LIMIT) -> ReplyChunks:
    return ReplyChunks(text, limit)

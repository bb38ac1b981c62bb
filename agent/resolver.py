"""Turn `!w ...` command text into a wttr.in query, updating per-nick memory.

Rules are tried in order and the first match wins:
  1. `!w` alone          -> the requester's remembered query
  2. `!w <place name>`   -> place query, remembered for the requester
  3. `!w <digits>`       -> US zip query, remembered for the requester
  4. `!w <nick>`         -> that nick's remembered query
A single alphabetic word satisfies rule 2, so rule 4 only sees arguments with
other non-digit characters in them (`!w _bob`, `!w [away]`).
"""
from __future__ import annotations

import logging
import re
from typing import Optional

from agent.memory import UserLocationMemory

LOGGER = logging.getLogger(__name__)

TRIGGER = "!w"

LOCATION_RE = re.compile(r"!w ([a-zA-Z,\s]+)")
ZIP_RE = re.compile(r"!w (\d+)")
NICK_RE = re.compile(r"!w ([^\d\s]+)")
_SEPARATORS_RE = re.compile(r"\+{2,}")


def place_query(place: str) -> str:
    """`New York, NY` -> `New+York+NY`."""
    joined = place.replace(" ", "+").replace(",", "+")
    return _SEPARATORS_RE.sub("+", joined)


def zip_query(digits: str) -> str:
    return f"{digits},+USA"


def resolve_query(text: str, requester: str, memory: UserLocationMemory) -> Optional[str]:
    if text == TRIGGER:
        return memory.lookup(requester)

    m = LOCATION_RE.search(text)
    if m:
        query = place_query(m.group(1))
        memory.remember(requester, query)
        LOGGER.debug("Remembered %r for %s", query, requester)
        return query

    m = ZIP_RE.search(text)
    if m:
        query = zip_query(m.group(1))
        memory.remember(requester, query)
        LOGGER.debug("Remembered %r for %s", query, requester)
        return query

    m = NICK_RE.search(text)
    if m:
        return memory.lookup(m.group(1))

    return None

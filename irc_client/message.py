from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


class IrcProtocolError(Exception):
    """Raised when a line received from the server cannot be understood."""


class IrcRegistrationError(Exception):
    """The server would not accept any nickname this session tried."""


CHANNEL_PREFIXES = ("#", "&", "+", "!")


@dataclass
class Message:
    command: str
    params: List[str] = field(default_factory=list)
    prefix: Optional[str] = None

    @property
    def source_nickname(self) -> Optional[str]:
        """
        Nickname of the sender, or None when the prefix names a server.
        - `nick!user@host` and `nick@host` are users
        - a bare token containing a dot is a server name
        - any other bare token is a nickname
        """
        if not self.prefix:
            return None
        if "!" in self.prefix or "@" in self.prefix:
            nick = self.prefix.split("!", 1)[0].split("@", 1)[0]
            return nick or None
        if "." in self.prefix:
            return None
        return self.prefix

    def to_line(self) -> str:
        parts: List[str] = []
        if self.prefix:
            parts.append(f":{self.prefix}")
        parts.append(self.command)
        if self.params:
            *middle, last = self.params
            parts.extend(middle)
            if not last or " " in last or last.startswith(":"):
                last = f":{last}"
            parts.append(last)
        return " ".join(parts)


def is_channel(target: str) -> bool:
    return bool(target) and target.startswith(CHANNEL_PREFIXES)


def parse_line(line: str) -> Message:
    """Parse one raw IRC line (without CRLF) into a Message."""
    rest = line.rstrip("\r\n")
    if not rest.strip():
        raise IrcProtocolError("empty line")

    # IRCv3 tags carry nothing this agent uses
    if rest.startswith("@"):
        _, _, rest = rest.partition(" ")
        rest = rest.lstrip(" ")

    prefix: Optional[str] = None
    if rest.startswith(":"):
        prefix, _, rest = rest[1:].partition(" ")
        rest = rest.lstrip(" ")
        if not prefix:
            raise IrcProtocolError(f"empty prefix in line: {line!r}")

    trailing: Optional[str] = None
    if " :" in rest:
        rest, trailing = rest.split(" :", 1)
    elif rest.startswith(":"):
        trailing, rest = rest[1:], ""

    tokens = rest.split()
    if not tokens:
        raise IrcProtocolError(f"missing command in line: {line!r}")

    command, params = tokens[0].upper(), tokens[1:]
    if trailing is not None:
        params.append(trailing)
    return Message(command=command, params=params, prefix=prefix)

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional, Union

from agent.memory import UserLocationMemory
from agent.resolver import resolve_query
from irc_client.message import Message, is_channel

LOGGER = logging.getLogger(__name__)


class Ignored:
    def __repr__(self) -> str:
        return "IGNORED"


IGNORED = Ignored()


@dataclass(frozen=True)
class Reply:
    requester: str
    target: str
    text: str


Command = Union[Ignored, Reply]


def classify_message(message: Message) -> Command:
    """Only PRIVMSGs from a user (not a server) can become a Reply."""
    if message.command != "PRIVMSG" or len(message.params) < 2:
        return IGNORED

    nick = message.source_nickname
    if not nick:
        return IGNORED

    target, text = message.params[0], message.params[1]
    # private messages are answered privately
    reply_to = target if is_channel(target) else nick
    return Reply(requester=nick, target=reply_to, text=text)


class MessageDispatcher:
    """
    Classifies inbound messages and runs the reply graph for resolved queries.
    Callers must await dispatch() before reading the next message: the memory
    is not safe for concurrent use.
    """

    def __init__(self, memory: UserLocationMemory, app: Any):
        self.memory = memory
        self.app = app

    async def dispatch(self, message: Message) -> Optional[dict]:
        command = classify_message(message)
        if not isinstance(command, Reply):
            return None

        query = resolve_query(command.text, command.requester, self.memory)
        if query is None:
            return None

        LOGGER.info("%s asked for %r in %s", command.requester, query, command.target)
        return await self.app.ainvoke(
            {
                "requester": command.requester,
                "target": command.target,
                "query": query,
            }
        )

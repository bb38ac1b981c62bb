from __future__ import annotations

import asyncio
import enum
import logging
from typing import Awaitable, Callable

from agent.dispatcher import MessageDispatcher
from irc_client.message import IrcProtocolError
from irc_client.session import IrcSession

LOGGER = logging.getLogger(__name__)

RECONNECT_DELAY_SECONDS = 5.0


class SessionState(enum.Enum):
    DISCONNECTED = "disconnected"
    CONNECTING = "connecting"
    ACTIVE = "active"


class ConnectionSupervisor:
    """
    Keeps exactly one relay session alive, forever.

    Every session end, clean or not, is followed by a fixed delay and a fresh
    connection attempt. There is no retry limit and no backoff.
    """

    def __init__(
        self,
        connect: Callable[[], Awaitable[IrcSession]],
        make_dispatcher: Callable[[IrcSession], MessageDispatcher],
        reconnect_delay: float = RECONNECT_DELAY_SECONDS,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self._connect = connect
        self._make_dispatcher = make_dispatcher
        self.reconnect_delay = reconnect_delay
        self._sleep = sleep
        self.state = SessionState.DISCONNECTED
        self.attempts = 0

    async def run(self) -> None:
        while True:
            try:
                await self.run_session()
                LOGGER.info("Bot disconnected. Attempting to reconnect...")
            except Exception as exc:
                LOGGER.exception("Error: %s. Attempting to reconnect...", exc)
            finally:
                self.state = SessionState.DISCONNECTED
            await self._sleep(self.reconnect_delay)

    async def run_session(self) -> None:
        """One connect/identify/consume cycle. Returns when the server closes the stream."""
        self.state = SessionState.CONNECTING
        self.attempts += 1
        session = await self._connect()
        try:
            await session.identify()
            self.state = SessionState.ACTIVE
            dispatcher = self._make_dispatcher(session)

            while True:
                try:
                    message = await session.read_message()
                except IrcProtocolError as exc:
                    LOGGER.warning("Error receiving message: %s", exc)
                    continue
                if message is None:
                    return
                await dispatcher.dispatch(message)
        finally:
            await session.close()

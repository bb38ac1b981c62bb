from __future__ import annotations

import asyncio
import logging
import ssl
from typing import Optional

from irc_client.message import IrcProtocolError, IrcRegistrationError, Message, parse_line

LOGGER = logging.getLogger(__name__)

RPL_WELCOME = "001"
ERR_ERRONEUSNICKNAME = "432"
ERR_NICKNAMEINUSE = "433"
MAX_NICK_RETRIES = 3


class IrcSession:
    """One connected relay session: line I/O plus protocol housekeeping."""

    def __init__(
        self,
        reader: asyncio.StreamReader,
        writer: asyncio.StreamWriter,
        nickname: str,
        channel: str,
        encoding: str = "utf-8",
    ):
        self.reader = reader
        self.writer = writer
        self.nickname = nickname
        self.channel = channel
        self.encoding = encoding
        self.joined = False
        self.nick_retries = 0

    @classmethod
    async def connect(
        cls,
        server: str,
        port: int,
        use_tls: bool,
        *,
        nickname: str,
        channel: str,
        connect_timeout: float = 30.0,
    ) -> "IrcSession":
        ssl_ctx: Optional[ssl.SSLContext] = ssl.create_default_context() if use_tls else None
        LOGGER.info("Connecting to %s:%s (tls=%s)", server, port, use_tls)
        reader, writer = await asyncio.wait_for(
            asyncio.open_connection(server, port, ssl=ssl_ctx),
            timeout=connect_timeout,
        )
        return cls(reader, writer, nickname=nickname, channel=channel)

    async def identify(self) -> None:
        await self.send(Message("NICK", [self.nickname]))
        await self.send(Message("USER", [self.nickname, "0", "*", self.nickname]))

    async def read_message(self) -> Optional[Message]:
        """
        Return the next message from the server, or None once the stream ends.
        Raises IrcProtocolError for a single malformed line; the session stays usable.
        """
        raw = await self.reader.readline()
        if not raw:
            return None

        line = raw.decode(self.encoding, errors="replace").rstrip("\r\n")
        LOGGER.debug("<< %s", line)
        message = parse_line(line)
        await self._housekeeping(message)
        return message

    async def _housekeeping(self, message: Message) -> None:
        if message.command == "PING":
            token = message.params[-1] if message.params else ""
            await self.send(Message("PONG", [token]))
        elif message.command == RPL_WELCOME and not self.joined:
            self.joined = True
            LOGGER.info("Registered as %s, joining %s", self.nickname, self.channel)
            await self.send(Message("JOIN", [self.channel]))
        elif message.command == ERR_ERRONEUSNICKNAME and not self.joined:
            raise IrcRegistrationError(f"server rejected nickname {self.nickname!r}")
        elif message.command == ERR_NICKNAMEINUSE and not self.joined:
            if self.nick_retries >= MAX_NICK_RETRIES:
                raise IrcRegistrationError(
                    f"nickname {self.nickname!r} still in use after {self.nick_retries} retries"
                )
            self.nick_retries += 1
            self.nickname = f"{self.nickname}_"
            LOGGER.warning("Nickname in use, retrying as %s", self.nickname)
            await self.send(Message("NICK", [self.nickname]))

    async def send_privmsg(self, target: str, text: str) -> None:
        clean = text.replace("\r", "").replace("\n", " ")
        await self.send(Message("PRIVMSG", [target, clean]))

    async def send(self, message: Message) -> None:
        line = message.to_line()
        if "\r" in line or "\n" in line:
            raise IrcProtocolError(f"refusing to send line with CR/LF: {line!r}")
        LOGGER.debug(">> %s", line)
        self.writer.write(f"{line}\r\n".encode(self.encoding))
        await self.writer.drain()

    async def close(self) -> None:
        if self.writer.is_closing():
            return
        self.writer.close()
        try:
            await self.writer.wait_closed()
        except (ConnectionError, ssl.SSLError) as exc:
            LOGGER.debug("Error while closing connection: %s", exc)

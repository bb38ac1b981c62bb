import asyncio
import logging
from typing import Optional

import click

from agent.dispatcher import MessageDispatcher
from agent.graph import build_graph
from agent.memory import UserLocationMemory
from agent.supervisor import ConnectionSupervisor
from config.settings import (
    DEFAULT_HTTP_TIMEOUT,
    DEFAULT_NICKNAME,
    DEFAULT_PORT,
    DEFAULT_RECONNECT_DELAY,
    DEFAULT_WEATHER_URL,
    BotSettings,
    env_name,
    load_env,
)
from irc_client.session import IrcSession
from weather_service.client import WeatherClient

LOGGER = logging.getLogger(__name__)


def build_supervisor(
    settings: BotSettings,
    memory: Optional[UserLocationMemory] = None,
    weather: Optional[WeatherClient] = None,
) -> ConnectionSupervisor:
    # memory outlives sessions: a reconnect must not forget anyone's location
    memory = memory if memory is not None else UserLocationMemory()
    weather = weather or WeatherClient(base_url=settings.weather_url, timeout=settings.http_timeout)

    async def connect() -> IrcSession:
        return await IrcSession.connect(
            settings.server,
            settings.port,
            settings.use_tls,
            nickname=settings.nickname,
            channel=settings.channel,
            connect_timeout=settings.connect_timeout,
        )

    def make_dispatcher(session: IrcSession) -> MessageDispatcher:
        return MessageDispatcher(memory, build_graph(weather, session))

    return ConnectionSupervisor(connect, make_dispatcher, reconnect_delay=settings.reconnect_delay)


async def run_bot(settings: BotSettings) -> None:
    LOGGER.info("Starting weather agent as %s on %s %s", settings.nickname, settings.server, settings.channel)
    await build_supervisor(settings).run()


@click.command()
@click.option("-s", "--server", required=True, envvar=env_name("server"), help="IRC server address")
@click.option("-p", "--port", default=DEFAULT_PORT, show_default=True, envvar=env_name("port"), help="IRC server port")
@click.option("-c", "--channel", required=True, envvar=env_name("channel"), help="IRC channel to join")
@click.option("-n", "--nickname", default=DEFAULT_NICKNAME, show_default=True, envvar=env_name("nickname"), help="Bot's nickname")
@click.option("--tls/--no-tls", "use_tls", default=True, show_default=True, envvar=env_name("tls"), help="Use TLS")
@click.option("--reconnect-delay", default=DEFAULT_RECONNECT_DELAY, show_default=True, envvar=env_name("reconnect_delay"), help="Seconds to wait before reconnecting")
@click.option("--http-timeout", default=DEFAULT_HTTP_TIMEOUT, show_default=True, envvar=env_name("http_timeout"), help="Weather request timeout (seconds)")
@click.option("--weather-url", default=DEFAULT_WEATHER_URL, show_default=True, envvar=env_name("weather_url"), help="wttr.in compatible base URL")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="INFO",
    envvar=env_name("log_level"),
    help="Logging level",
)
def cli(
    server: str,
    port: int,
    channel: str,
    nickname: str,
    use_tls: bool,
    reconnect_delay: float,
    http_timeout: float,
    weather_url: str,
    log_level: str,
) -> None:
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format='[%(asctime)s] %(levelname)s %(name)s: %(message)s',
    )
    settings = BotSettings(
        server=server,
        channel=channel,
        port=port,
        nickname=nickname,
        use_tls=use_tls,
        reconnect_delay=reconnect_delay,
        weather_url=weather_url,
        http_timeout=http_timeout,
    )
    try:
        asyncio.run(run_bot(settings))
    except KeyboardInterrupt:
        LOGGER.info('Weather agent stopped by user.')


def main() -> None:
    load_env()
    cli()


if __name__ == "__main__":
    main()

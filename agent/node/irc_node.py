from agent.chunker import CHUNK_LIMIT, chunk_reply
from agent.state.agent_state import ReplyState
from irc_client.session import IrcSession


def error_text(query: str, cause: str) -> str:
    return f"Error: Could not get weather data for {query}. {cause}"


async def send_reply_node(state: ReplyState, session: IrcSession) -> ReplyState:
    target = state["target"]
    if state.get("error"):
        lines = [error_text(state["query"], state["error"])]
    else:
        lines = list(chunk_reply(state.get("message_text", ""), CHUNK_LIMIT))

    sent: list[str] = []
    for line in lines:
        await session.send_privmsg(target, line)
        sent.append(line)
    state["sent_lines"] = sent
    return state

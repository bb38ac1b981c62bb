from __future__ import annotations

from langgraph.graph import StateGraph, START, END
from agent.node.format_node import format_reply_node
from agent.node.irc_node import send_reply_node
from agent.node.weather_node import get_weather_node
from agent.state.agent_state import ReplyState

# ---------------------------
# Graph builder
# ---------------------------

def build_graph(weather, session):
    """
    Build an async LangGraph that:
      1) fetches the wttr.in payload for state["query"]
      2) renders it as "<nick>'s weather: ..." (skipped when the fetch failed)
      3) sends it to state["target"] in 400-character chunks, or sends one error line
    `weather` must expose: await weather.fetch(query)
    `session` must expose: await session.send_privmsg(target, text)
    """
    workflow = StateGraph(ReplyState)

    async def node_get_weather(state: ReplyState) -> ReplyState:
        return await get_weather_node(state, weather)

    async def node_format_reply(state: ReplyState) -> ReplyState:
        return await format_reply_node(state)

    async def node_send_reply(state: ReplyState) -> ReplyState:
        return await send_reply_node(state, session)

    def route_after_weather(state: ReplyState) -> str:
        return "send_reply" if state.get("error") else "format_reply"

    workflow.add_node("get_weather", node_get_weather)
    workflow.add_node("format_reply", node_format_reply)
    workflow.add_node("send_reply", node_send_reply)

    workflow.add_edge(START, "get_weather")
    workflow.add_conditional_edges(
        "get_weather",
        route_after_weather,
        {"format_reply": "format_reply", "send_reply": "send_reply"},
    )
    workflow.add_edge("format_reply", "send_reply")
    workflow.add_edge("send_reply", END)

    return workflow.compile()

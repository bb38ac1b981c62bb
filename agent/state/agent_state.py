from typing import Any, TypedDict


class ReplyState(TypedDict, total=False):
    # Inputs
    requester: str  # nick that issued the command
    target: str  # channel (or nick, for private messages) to answer in
    query: str  # canonical wttr.in query

    # Working data
    weather_payload: Any
    message_text: str
    error: str

    # Outputs
    sent_lines: list[str]

"""IRC weather agent: command resolution, reply pipeline and session supervision.

Modules:
- resolver / memory: `!w` command text -> wttr.in query, per-nick memory
- dispatcher: inbound IRC message -> reply graph
- graph: LangGraph pipeline (fetch -> format -> send)
- supervisor: reconnect loop around one IRC session
- main: command-line entry point
"""

"""
Session 1, Task 2: Researcher and Writer as LangChain TOOLS.

The tool-routing pattern:
- ONE agent (a chat model with tools bound)
- Researcher and Writer are tools the agent may call
- The model decides the order by reading the tool descriptions
- No explicit task list: the user message is the whole job

The loop is an explicit LangGraph graph: agent → tools → agent ... → END.

Run: python 02_langchain_tool_routing.py
"""

import os
from dataclasses import dataclass, field
from dotenv import load_dotenv

load_dotenv()

from typing import Annotated
from typing_extensions import TypedDict

from langchain_anthropic import ChatAnthropic
from langchain_core.callbacks import BaseCallbackHandler
from langchain_core.messages import HumanMessage, SystemMessage, ToolMessage
from langchain_core.runnables import RunnableConfig
from langchain_core.tools import tool
from langgraph.graph import StateGraph, START, END
from langgraph.graph.message import add_messages

MODEL = os.getenv("LAB_MODEL", "claude-sonnet-4-20250514")

# ── Simulated research notes ──────────────────────────────────

NOTES = {
    "multi-agent": (
        "Multi-agent systems split a job between specialised LLM agents. "
        "Common patterns: supervisor, sequential pipeline, debate. "
        "Source: Wu et al. (2023) 'AutoGen'."
    ),
    "tool use": (
        "Tool use lets a model call functions through a structured schema. "
        "The tool description is the only thing the model knows about the tool. "
        "Source: Anthropic tool use documentation."
    ),
    "react": (
        "ReAct interleaves reasoning and acting: think, call a tool, observe, repeat. "
        "Source: Yao et al. (2023) 'ReAct: Synergizing Reasoning and Acting'."
    ),
    "crewai": (
        "CrewAI organises agents by role, goal and backstory and runs their tasks "
        "through a sequential or hierarchical process. Source: CrewAI docs."
    ),
}


def search_notes(topic: str) -> str:
    """Return every note whose key, or any word of it, appears in the topic."""
    topic_lower = topic.lower()
    results = []
    for key, content in NOTES.items():
        if key in topic_lower or any(w in topic_lower for w in key.replace("-", " ").split()):
            results.append(content)
    if results:
        return "\n".join(results)
    return f"Notes on '{topic}': no specific sources found; general background only."


# ── Prompts ───────────────────────────────────────────────────

ROUTER_SYSTEM = """You coordinate two tools to complete writing jobs.
Always call Researcher first, pass its notes to Writer, then reply with the article.
Do not write the article yourself."""

WRITER_SYSTEM = """You are a professional technical writer.
Write a short, well-structured article (a title and three or four paragraphs) from the notes provided.
Keep every source that appears in the notes.
Output ONLY the article text."""


def text_of(message) -> str:
    """Flatten a message's content to its text."""
    content = message.content
    if isinstance(content, list):
        content = next(
            (b["text"] for b in content if isinstance(b, dict) and b.get("type") == "text"), ""
        )
    return content


# ── Tools ─────────────────────────────────────────────────────
# The tool NAMES are what the router sees, so they are the role names.


def make_tools(writer_model):
    @tool("Researcher")
    def researcher(topic: str) -> str:
        """Gather research notes and sources on a topic. Call this before Writer."""
        return search_notes(topic)

    @tool("Writer")
    def writer(notes: str) -> str:
        """Write a short article from research notes. Call this after Researcher."""
        response = writer_model.invoke(
            [SystemMessage(content=WRITER_SYSTEM), HumanMessage(content=notes)]
        )
        return text_of(response)

    return [researcher, writer]


# ── Observability ─────────────────────────────────────────────


class TraceCallback(BaseCallbackHandler):
    """Prints every tool call the router makes."""

    def on_tool_start(self, serialized, input_str, **kwargs):
        name = (serialized or {}).get("name", "?")
        print(f"  [TOOL] {name} ← {str(input_str)[:80]}")

    def on_tool_end(self, output, **kwargs):
        print(f"  [TOOL] → {str(getattr(output, 'content', output))[:80]}")


# ── Graph ─────────────────────────────────────────────────────


class AgentState(TypedDict):
    messages: Annotated[list, add_messages]


def should_continue(state: AgentState) -> str:
    """Route based on whether the agent requested tool calls."""
    last_message = state["messages"][-1]
    if getattr(last_message, "tool_calls", None):
        return "tools"
    return "end"


def build_agent(model, writer_model=None, system_prompt: str = ROUTER_SYSTEM, tools=None):
    """Compile the router graph.

    tools defaults to the Researcher and Writer from make_tools(); the writer
    model defaults to the router model.
    """
    if tools is None:
        tools = make_tools(writer_model or model)
    tool_map = {t.name: t for t in tools}
    model_with_tools = model.bind_tools(tools)

    def agent_node(state: AgentState, config: RunnableConfig) -> AgentState:
        messages = [SystemMessage(content=system_prompt)] + state["messages"]
        return {"messages": [model_with_tools.invoke(messages, config=config)]}

    def tool_node(state: AgentState, config: RunnableConfig) -> AgentState:
        results = []
        for tc in state["messages"][-1].tool_calls:
            if tc["name"] in tool_map:
                result = tool_map[tc["name"]].invoke(tc["args"], config=config)
            else:
                result = f"Error: unknown tool '{tc['name']}'"
            results.append(ToolMessage(content=str(result), tool_call_id=tc["id"]))
        return {"messages": results}

    graph = StateGraph(AgentState)
    graph.add_node("agent", agent_node)
    graph.add_node("tools", tool_node)
    graph.add_edge(START, "agent")
    graph.add_conditional_edges("agent", should_continue, {"tools": "tools", "end": END})
    graph.add_edge("tools", "agent")
    return graph.compile()


# ── Run It ────────────────────────────────────────────────────


@dataclass
class RunResult:
    output: str
    tools_called: list[str] = field(default_factory=list)
    messages: list = field(default_factory=list)


def run(
    task: str,
    model=None,
    writer_model=None,
    system_prompt: str = ROUTER_SYSTEM,
    max_steps: int = 10,
    callbacks=None,
    tools=None,
) -> RunResult:
    """Hand the whole job to the router agent and return what it did.

    max_steps is LangGraph's recursion limit; exceeding it raises
    GraphRecursionError.
    """
    if model is None:
        model = ChatAnthropic(model=MODEL, max_tokens=1024)

    agent = build_agent(model, writer_model, system_prompt, tools)
    config = {"recursion_limit": max_steps}
    if callbacks:
        config["callbacks"] = callbacks

    result = agent.invoke({"messages": [HumanMessage(content=task)]}, config=config)
    messages = result["messages"]
    tools_called = [
        tc["name"] for m in messages for tc in (getattr(m, "tool_calls", None) or [])
    ]
    return RunResult(output=text_of(messages[-1]), tools_called=tools_called, messages=messages)


if __name__ == "__main__":
    task = "Write a short article about multi-agent systems and tool use."

    print("=" * 60)
    print("LANGCHAIN: one agent, Researcher and Writer as tools")
    print("=" * 60)
    print(f"TASK: {task}\n")

    result = run(task, callbacks=[TraceCallback()])

    print("\n" + "=" * 60)
    print("FINAL ARTICLE")
    print("=" * 60)
    print(result.output)

    print("\n" + "=" * 60)
    print("PROCESS SUMMARY")
    print("=" * 60)
    print(f"  Tools called (in order): {result.tools_called}")
    print(f"  Messages in state: {len(result.messages)}")
    if result.tools_called[:2] != ["Researcher", "Writer"]:
        print("  ⚠ The router did not follow Researcher → Writer (see session-02/02_failure_modes.py)")

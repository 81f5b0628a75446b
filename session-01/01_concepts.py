"""
Session 1, Task 1: Agents, tools, tasks and crews.
===================================================
LangChain and CrewAI use the same four words (Agent, Tool, Task, Crew) for
slightly different things. Before comparing the two frameworks, pin down
what each word means on each side.

Run: python 01_concepts.py [TERM ...]
"""

import sys

CONCEPTS = {
    "Agent": {
        "meaning": "An LLM-driven actor that reasons about a job and may call tools.",
        "langchain": (
            "One model in a loop. It reads the tool descriptions and decides "
            "which tool to call next, or that it is done."
        ),
        "crewai": (
            "A persona with a role, a goal and a backstory. Several agents "
            "usually work together, each on its own task."
        ),
    },
    "Tool": {
        "meaning": "A callable function exposed to an agent during reasoning.",
        "langchain": (
            "A function wrapped with @tool. The docstring becomes the "
            "description the router model reads. In the tool-routing "
            "pattern, the Researcher and the Writer themselves are tools."
        ),
        "crewai": (
            "A function wrapped with crewai.tools.tool and attached to one "
            "agent. Only that agent can call it."
        ),
    },
    "Task": {
        "meaning": "A unit of work with a description and an assigned agent.",
        "langchain": (
            "No first-class type. The task is the user message handed to "
            "run(). The agent decides how to split it up."
        ),
        "crewai": (
            "A Task object with a description, an expected output and one "
            "agent. Tasks can pass their output to later tasks as context."
        ),
    },
    "Crew": {
        "meaning": "A group of agents and tasks executed together.",
        "langchain": (
            "No equivalent. If you want several cooperating agents, you wire "
            "them into a graph yourself (see LangGraph)."
        ),
        "crewai": (
            "A Crew object holding agents, tasks and a process (sequential or "
            "hierarchical). kickoff() runs it."
        ),
    },
}


def describe(term: str) -> str:
    """Return a printable explanation of one concept on both sides."""
    for name, entry in CONCEPTS.items():
        if name.lower() == term.strip().lower():
            return (
                f"{name}: {entry['meaning']}\n"
                f"  LangChain: {entry['langchain']}\n"
                f"  CrewAI:    {entry['crewai']}"
            )
    raise KeyError(f"Unknown concept '{term}'. Known concepts: {', '.join(CONCEPTS)}")


if __name__ == "__main__":
    terms = sys.argv[1:] or list(CONCEPTS)

    for term in terms:
        print("=" * 60)
        try:
            print(describe(term))
        except KeyError as e:
            print(f"ERROR: {e.args[0]}")
    print("=" * 60)

    print("\nKEY IDEA:")
    print("  LangChain: the MODEL routes between capabilities (tools).")
    print("  CrewAI:    the CREW definition assigns capabilities (agents) to tasks.")

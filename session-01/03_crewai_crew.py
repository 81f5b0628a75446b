"""
Session 1, Task 3: Researcher and Writer as CrewAI AGENTS.

The role-based pattern:
- Each capability is an Agent with a role, goal and backstory
- Each Agent gets its own Task (description + expected output)
- A Crew runs the tasks with a Process (here: sequential)
- The Writer's task receives the Researcher's output as context

Same Researcher → Writer job as Task 2, but the ORDER is fixed by the crew,
not chosen by the model.

Run: python 03_crewai_crew.py ["topic"]
"""

import os
import sys
from dotenv import load_dotenv

load_dotenv()

from crewai import Agent, Crew, LLM, Process, Task
from crewai.tools import tool
from pydantic import BaseModel, Field

MODEL = os.getenv("LAB_MODEL", "claude-sonnet-4-20250514")

# ── Tools ─────────────────────────────────────────────────────

NOTES = {
    "multi-agent": (
        "Multi-agent systems split a job between specialised LLM agents. "
        "Common patterns: supervisor, sequential pipeline, debate. "
        "Source: Wu et al. (2023) 'AutoGen'."
    ),
    "tool use": (
        "Tool use lets a model call functions through a structured schema. "
        "Source: Anthropic tool use documentation."
    ),
    "crewai": (
        "CrewAI organises agents by role, goal and backstory and runs their tasks "
        "through a sequential or hierarchical process. Source: CrewAI docs."
    ),
}


def lookup_notes(topic: str) -> str:
    topic_lower = topic.lower()
    results = [
        content
        for key, content in NOTES.items()
        if key in topic_lower or any(w in topic_lower for w in key.replace("-", " ").split())
    ]
    if results:
        return "\n".join(results)
    return f"Notes on '{topic}': no specific sources found; general background only."


@tool("Search notes")
def search_notes(topic: str) -> str:
    """Search the research notes for a topic. Returns matching facts with their sources."""
    return lookup_notes(topic)


# ── Structured output ─────────────────────────────────────────
# The Writer's task is parsed into this model, so kickoff() returns data.


class Article(BaseModel):
    title: str = Field(description="Article title")
    body: str = Field(description="Article text, three or four paragraphs")
    sources: list[str] = Field(default_factory=list, description="Sources cited in the article")


def print_step(step):
    """Crew-level step callback: one line per agent step."""
    text = getattr(step, "output", None) or getattr(step, "text", None) or str(step)
    print(f"  [STEP] {type(step).__name__}: {str(text)[:100]}")


# ── Crew ──────────────────────────────────────────────────────


def build_crew(llm=None, verbose: bool = False) -> Crew:
    if llm is None:
        llm = LLM(model=f"anthropic/{MODEL}", max_tokens=1024)

    researcher = Agent(
        role="Researcher",
        goal="Collect accurate, sourced notes on {topic}",
        backstory="A careful analyst who never writes without sources.",
        tools=[search_notes],
        llm=llm,
        allow_delegation=False,
        verbose=verbose,
    )
    writer = Agent(
        role="Writer",
        goal="Turn the Researcher's notes into a clear short article",
        backstory="A technical writer who explains ideas plainly.",
        llm=llm,
        allow_delegation=False,
        verbose=verbose,
    )

    research = Task(
        description="Research {topic}. List the key facts with a source for each.",
        expected_output="Bullet-point notes with a source for each fact",
        agent=researcher,
    )
    write = Task(
        description="Write a short article on {topic} from the research notes.",
        expected_output="A titled article of three or four paragraphs that lists its sources",
        agent=writer,
        context=[research],
        output_pydantic=Article,
    )

    return Crew(
        agents=[researcher, writer],
        tasks=[research, write],
        process=Process.sequential,
        step_callback=print_step if verbose else None,
        verbose=verbose,
    )


def kickoff(topic: str, llm=None, verbose: bool = True):
    """Build the crew and run it once for a topic. Returns the CrewOutput."""
    crew = build_crew(llm=llm, verbose=verbose)
    return crew.kickoff(inputs={"topic": topic})


# ── Run It ────────────────────────────────────────────────────

if __name__ == "__main__":
    topic = sys.argv[1] if len(sys.argv) > 1 else "multi-agent systems and tool use"

    print("=" * 60)
    print("CREWAI: Researcher and Writer as agents, run by a crew")
    print("=" * 60)
    print(f"TOPIC: {topic}")
    print("Process: sequential (Researcher task → Writer task)\n")

    result = kickoff(topic)

    print("\n" + "=" * 60)
    print("FINAL ARTICLE")
    print("=" * 60)
    article = result.pydantic
    if isinstance(article, Article):
        print(f"# {article.title}\n\n{article.body}")
        print(f"\nSources: {', '.join(article.sources) or '(none)'}")
    else:
        print(result.raw)

    print("\n" + "=" * 60)
    print("PROCESS SUMMARY")
    print("=" * 60)
    for task_output in result.tasks_output:
        print(f"  {task_output.agent}: {len(task_output.raw)} chars")
    if result.token_usage:
        print(f"  Token usage: {result.token_usage}")

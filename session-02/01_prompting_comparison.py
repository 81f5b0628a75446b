"""
Session 2, Task 1: How each framework prompts the model
========================================================
Both frameworks end up sending plain text to an LLM. What differs is how
that text is assembled:

  LangChain (tool routing):
    ONE router prompt that carries every tool's name and description plus the
    ordering rules. Routing quality depends on that single prompt.

  CrewAI (role-based):
    ONE prompt PER AGENT, composed from role + goal + backstory, then the
    task description and expected output. Each prompt is narrow.

This script renders both prompts for the same Researcher → Writer job
(no API calls), then optionally sends them to Claude to compare outputs.

Run: python 01_prompting_comparison.py [--send] [--topic TOPIC]
"""

import argparse
import os
from dataclasses import dataclass, field

import anthropic
from dotenv import load_dotenv

load_dotenv()

MODEL = os.getenv("LAB_MODEL", "claude-sonnet-4-20250514")


# ============================================================
# Template system
# ============================================================

@dataclass
class PromptTemplate:
    """A reusable prompt template with named parameters."""

    name: str
    description: str
    system: str
    user: str
    parameters: list[str] = field(default_factory=list)

    def render(self, **kwargs) -> tuple[str, str]:
        """Render the template with provided parameters.

        Returns (system_prompt, user_message).
        """
        missing = [p for p in self.parameters if p not in kwargs]
        if missing:
            raise ValueError(f"Missing parameters: {missing}")

        return self.system.format(**kwargs), self.user.format(**kwargs)


# ============================================================
# LangChain: one router prompt
# ============================================================

LANGCHAIN_ROUTER = PromptTemplate(
    name="langchain_router",
    description="Single system prompt for a tool-routing agent",
    parameters=["tool_list", "task"],
    system="""You coordinate two tools to complete writing jobs.

Tools:
{tool_list}

Always call Researcher first, pass its notes to Writer, then reply with the article.""",
    user="{task}",
)

TOOLS = [
    ("Researcher", "Gather research notes and sources on a topic. Call this before Writer."),
    ("Writer", "Write a short article from research notes. Call this after Researcher."),
]


def render_langchain_prompt(task: str, tools=TOOLS) -> tuple[str, str]:
    """tools is a list of (name, description) pairs, in the order the router sees them."""
    if not tools:
        raise ValueError("A tool-routing prompt needs at least one tool")
    tool_list = "\n".join(f"- {name}: {description}" for name, description in tools)
    return LANGCHAIN_ROUTER.render(tool_list=tool_list, task=task)


# ============================================================
# CrewAI: one prompt per agent
# ============================================================
# Mirrors the way CrewAI composes an agent prompt: the role-playing line,
# then the task and its expected-output criteria.

CREWAI_AGENT = PromptTemplate(
    name="crewai_agent",
    description="Per-agent prompt built from role, goal and backstory",
    parameters=["role", "goal", "backstory", "task", "expected_output"],
    system="""You are {role}. {backstory}
Your personal goal is: {goal}""",
    user="""Current Task: {task}

This is the expected criteria for your final answer: {expected_output}
you MUST return the actual complete content as the final answer, not a summary.""",
)

CREW = [
    {
        "role": "Researcher",
        "goal": "Collect accurate, sourced notes on {topic}",
        "backstory": "A careful analyst who never writes without sources.",
        "task": "Research {topic}. List the key facts with a source for each.",
        "expected_output": "Bullet-point notes with a source for each fact",
    },
    {
        "role": "Writer",
        "goal": "Turn the Researcher's notes into a clear short article",
        "backstory": "A technical writer who explains ideas plainly.",
        "task": "Write a short article on {topic} from the research notes.",
        "expected_output": "A titled article of three or four paragraphs",
    },
]


def render_crewai_prompt(role, goal, backstory, task, expected_output) -> tuple[str, str]:
    return CREWAI_AGENT.render(
        role=role, goal=goal, backstory=backstory, task=task, expected_output=expected_output
    )


def render_crew(topic: str) -> list[tuple[str, str, str]]:
    """Return (role, system, user) for every agent in CREW, with {topic} filled in."""
    prompts = []
    for member in CREW:
        filled = {k: v.replace("{topic}", topic) for k, v in member.items()}
        system, user = render_crewai_prompt(**filled)
        prompts.append((member["role"], system, user))
    return prompts


# ============================================================
# Send both to the model
# ============================================================

def call_claude(client, system: str, user: str, max_tokens: int = 512) -> tuple[str, int, int]:
    """Return (text, input_tokens, output_tokens)."""
    message = client.messages.create(
        model=MODEL,
        max_tokens=max_tokens,
        system=system,
        messages=[{"role": "user", "content": user}],
    )
    return message.content[0].text, message.usage.input_tokens, message.usage.output_tokens


def compare(topic: str):
    """Run the LangChain router prompt once and each CrewAI agent prompt in turn.

    The router call here has no tools bound, so it shows how the model reads
    the routing instructions, not a full agent run.
    """
    client = anthropic.Anthropic()

    print("=" * 60)
    print("LANGCHAIN ROUTER (one call)")
    print("=" * 60)
    system, user = render_langchain_prompt(f"Write a short article about {topic}.")
    try:
        text, in_tok, out_tok = call_claude(client, system, user)
        print(f"\n{text}\n")
        print(f"  Tokens: {in_tok} in / {out_tok} out")
    except Exception as e:
        print(f"  ERROR: {e}")

    print("\n" + "=" * 60)
    print("CREWAI AGENTS (one call per agent)")
    print("=" * 60)
    context = ""
    total_in = total_out = 0
    for role, system, user in render_crew(topic):
        if context:
            user += f"\n\nThis is the context you're working with:\n{context}"
        print(f"\n--- {role} ---")
        try:
            text, in_tok, out_tok = call_claude(client, system, user)
        except Exception as e:
            print(f"  ERROR: {e}")
            break
        total_in += in_tok
        total_out += out_tok
        context = text
        print(f"\n{text[:600]}\n")
    print(f"  Tokens (all agents): {total_in} in / {total_out} out")


def show_prompts(topic: str):
    print("=" * 60)
    print("LANGCHAIN: the router prompt")
    print("=" * 60)
    system, user = render_langchain_prompt(f"Write a short article about {topic}.")
    print(f"[system]\n{system}\n\n[user]\n{user}")

    for role, system, user in render_crew(topic):
        print("\n" + "=" * 60)
        print(f"CREWAI: the {role} prompt")
        print("=" * 60)
        print(f"[system]\n{system}\n\n[user]\n{user}")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Compare LangChain and CrewAI prompt assembly")
    parser.add_argument("--topic", default="multi-agent systems")
    parser.add_argument("--send", action="store_true", help="Also send the prompts to Claude")
    args = parser.parse_args()

    show_prompts(args.topic)
    if args.send:
        print()
        compare(args.topic)

    print("\n" + "=" * 60)
    print("KEY TAKEAWAYS:")
    print("  1. LangChain: one prompt must explain EVERY tool and the order to use them")
    print("  2. CrewAI: each agent sees only its own role, goal and task")
    print("  3. A weak router prompt → skipped or misused tools (Task 2)")
    print("  4. Narrow per-agent prompts cost more calls but fail more predictably")
    print("=" * 60)

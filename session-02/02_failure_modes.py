"""
Session 2, Task 2: Tool-routing failure modes.

With tool routing, nothing but the prompt makes the agent call Researcher
before Writer. Weak prompts show up in the trace as:
1. Skipped steps (Writer never called, or no tools at all)
2. Out-of-order steps (Writer before Researcher)
3. Repeated steps (Researcher called again and again)
4. Tool misuse (calls to tools that don't exist)

This script runs the same job with a WEAK and a STRONG router prompt and
analyses the tool-call traces. It detects failures; it does not fix them.

Run: python 02_failure_modes.py
"""

import importlib.util
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

EXPECTED_ORDER = ("Researcher", "Writer")

# ── Trace analysis ────────────────────────────────────────────


@dataclass
class TraceAnalysis:
    tools_called: list[str]
    skipped: list[str] = field(default_factory=list)
    out_of_order: bool = False
    repeated: list[str] = field(default_factory=list)
    unknown: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not (self.skipped or self.out_of_order or self.repeated or self.unknown)


def analyse_trace(tools_called, expected=EXPECTED_ORDER) -> TraceAnalysis:
    """Compare the tools an agent called against the steps it should have run, in order."""
    tools_called = list(tools_called)
    counts = Counter(tools_called)

    skipped = [step for step in expected if step not in counts]
    repeated = [step for step in expected if counts[step] > 1]
    unknown = sorted({name for name in tools_called if name not in expected})

    # First call of each expected step must follow the first call of the one before it
    first_calls = [tools_called.index(step) for step in expected if step in counts]
    out_of_order = first_calls != sorted(first_calls)

    return TraceAnalysis(
        tools_called=tools_called,
        skipped=skipped,
        out_of_order=out_of_order,
        repeated=repeated,
        unknown=unknown,
    )


def print_analysis(analysis: TraceAnalysis, label: str):
    print(f"\n{'─'*40}")
    print(f"ANALYSIS: {label}")
    print(f"  Tools called: {analysis.tools_called}")
    if analysis.skipped:
        print(f"  ⚠ Skipped steps: {analysis.skipped}")
    if analysis.out_of_order:
        print(f"  ⚠ Steps out of order (expected {' → '.join(EXPECTED_ORDER)})")
    if analysis.repeated:
        print(f"  ⚠ Repeated steps: {analysis.repeated}")
    if analysis.unknown:
        print(f"  ⚠ Unknown tools: {analysis.unknown}")
    if analysis.ok:
        print("  ✓ Researcher → Writer, once each")
    print(f"{'─'*40}")


# ── Prompts ───────────────────────────────────────────────────

WEAK_PROMPT = "You are a helpful assistant. You have some tools."

STRONG_PROMPT = """You coordinate two tools to complete writing jobs.
1. Call Researcher exactly once with the topic.
2. Call Writer exactly once, passing the Researcher's notes verbatim.
3. Reply with the Writer's article. Never write the article yourself."""

# ── Agent (same router graph as Session 1, Task 2) ────────────


def load_tool_routing():
    """Import session-01/02_langchain_tool_routing.py; its file name is not a valid module name."""
    path = Path(__file__).resolve().parent.parent / "session-01" / "02_langchain_tool_routing.py"
    spec = importlib.util.spec_from_file_location("langchain_tool_routing", path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


tool_routing = load_tool_routing()


def run_with_prompt(task: str, system_prompt: str, model=None, max_steps: int = 12) -> list[str]:
    """Run the Session 1 router with a different system prompt and return the tool names it called."""
    return tool_routing.run(task, model=model, system_prompt=system_prompt, max_steps=max_steps).tools_called


# ── Failure Mode Tests ────────────────────────────────────────

if __name__ == "__main__":
    cases = [
        ("WEAK prompt, vague task", WEAK_PROMPT, "Write something about AI agents."),
        ("WEAK prompt, explicit task", WEAK_PROMPT, "Research AI agents and then write an article."),
        ("STRONG prompt, vague task", STRONG_PROMPT, "Write something about AI agents."),
        ("STRONG prompt, explicit task", STRONG_PROMPT, "Research AI agents and then write an article."),
    ]

    results = []
    for label, prompt, task in cases:
        print("\n" + "█" * 60)
        print(label)
        print("█" * 60)
        try:
            analysis = analyse_trace(run_with_prompt(task, prompt))
        except Exception as e:
            print(f"  ERROR: {e}")
            continue
        print_analysis(analysis, label)
        results.append((label, analysis.ok))

    print("\n" + "=" * 60)
    print("SUMMARY")
    print("=" * 60)
    for label, ok in results:
        print(f"  [{'PASS' if ok else 'FAIL'}] {label}")

    print()
    print("KEY TAKEAWAYS:")
    print("  1. Tool routing = the model decides the steps; the prompt is the only guard")
    print("  2. Check the TRACE, not just the final text: a good-looking answer can skip research")
    print("  3. A crew with a sequential process cannot skip or reorder steps (Session 1, Task 3)")
    print("=" * 60)

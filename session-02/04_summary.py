"""
Session 2, Task 4: Summary of LangChain tool routing vs CrewAI crews.

Side-by-side comparison of the two Researcher → Writer builds from Session 1.
"""

HEADERS = ("Aspect", "LangChain (tool routing)", "CrewAI (crew)")

ROWS = [
    ("Researcher / Writer are", "Tools", "Agents"),
    ("Who orders the steps?", "The model", "The crew (process)"),
    ("Entry point", "run(task)", "crew.kickoff(inputs)"),
    ("Unit of work", "The user message", "Task + expected output"),
    ("Prompting", "One router prompt", "One prompt per agent"),
    ("Passing results on", "Tool messages in state", "Task context"),
    ("Structured output", "DIY parsing", "output_pydantic"),
    ("LLM calls per job", "Fewer", "More"),
    ("Typical failure", "Skipped/misused tools", "Rigid plan"),
    ("Loop control", "Full (graph edges)", "Process type only"),
    ("Observability", "Callbacks", "verbose + step_callback"),
]


def render_table(rows, headers=HEADERS) -> str:
    """Draw rows as a box table; every line has the same width."""
    widths = [max(len(str(r[i])) for r in [headers, *rows]) for i in range(len(headers))]

    def rule(left, mid, right):
        return left + mid.join("─" * (w + 2) for w in widths) + right

    def line(cells):
        return "│" + "│".join(f" {str(c):<{w}} " for c, w in zip(cells, widths)) + "│"

    lines = [rule("┌", "┬", "┐"), line(headers), rule("├", "┼", "┤")]
    lines += [line(r) for r in rows]
    lines.append(rule("└", "┴", "┘"))
    return "\n".join(lines)


SUMMARY = """
WHEN TO USE WHAT:

  LangChain (tool routing):
    • The model should adapt the plan to the request
    • You need full control of the loop: edges, interrupts, checkpoints
    • You already live in the LangChain ecosystem
    • Watch for: skipped or out-of-order steps when the prompt is weak

  CrewAI (role-based crew):
    • The job splits into roles with fixed hand-offs
    • Steps must always run in the same order
    • You want agents described as role / goal / backstory
    • Watch for: extra LLM calls and a plan the model cannot rearrange

THE RULE OF THUMB:
  Score the checklist (Task 3).
  If it's a tie, build the Researcher → Writer job in both and compare traces.
"""


if __name__ == "__main__":
    print("=" * 60)
    print("LANGCHAIN vs CREWAI")
    print("=" * 60)
    print(render_table(ROWS))
    print(SUMMARY)

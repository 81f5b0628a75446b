"""
Session 2, Task 3: LangChain or CrewAI? An eight-question checklist
===================================================================
Each "yes" counts toward the framework that handles that need more
naturally. The questions are the same as the Checklist section of GUIDE.md.

Usage examples:
  # Interactive
  python 03_checklist.py

  # Non-interactive: one y/n per question, in order
  python 03_checklist.py --answers yynnynyn
"""

import argparse
import sys
from typing import Literal

from pydantic import BaseModel


class ChecklistItem(BaseModel):
    question: str
    favours: Literal["langchain", "crewai"]


CHECKLIST = [
    ChecklistItem(
        question="Do you want one agent to decide which step runs next?",
        favours="langchain",
    ),
    ChecklistItem(
        question="Does the work split naturally into roles with distinct responsibilities?",
        favours="crewai",
    ),
    ChecklistItem(
        question="Must the steps always run in a fixed order?",
        favours="crewai",
    ),
    ChecklistItem(
        question="Do you already use LangChain models, retrievers or tools elsewhere?",
        favours="langchain",
    ),
    ChecklistItem(
        question=(
            "Do you need fine-grained control over the agent loop, such as graph edges, "
            "interrupts or checkpoints?"
        ),
        favours="langchain",
    ),
    ChecklistItem(
        question="Would you rather describe agents as role, goal and backstory than as code?",
        favours="crewai",
    ),
    ChecklistItem(
        question="Can a single prompt explain every tool well enough for the model to pick correctly?",
        favours="langchain",
    ),
    ChecklistItem(
        question="Do later steps need the full output of earlier steps as context?",
        favours="crewai",
    ),
]

LABELS = {"langchain": "LangChain", "crewai": "CrewAI"}


def parse_answers(answers) -> list[bool]:
    """Accept a 'yn' string or a sequence of booleans, one per checklist item."""
    if isinstance(answers, str):
        answers = answers.strip().lower()
        bad = sorted(set(answers) - {"y", "n"})
        if bad:
            raise ValueError(f"Answers must be 'y' or 'n', got: {bad}")
        answers = [a == "y" for a in answers]
    else:
        answers = list(answers)
        bad = [a for a in answers if not isinstance(a, bool)]
        if bad:
            raise ValueError(f"Answers must be True or False, got: {bad}")

    if len(answers) != len(CHECKLIST):
        raise ValueError(f"Expected {len(CHECKLIST)} answers, got {len(answers)}")
    return answers


def score(answers) -> dict[str, int]:
    """Count the 'yes' answers per framework."""
    tally = {"langchain": 0, "crewai": 0}
    for item, yes in zip(CHECKLIST, parse_answers(answers)):
        if yes:
            tally[item.favours] += 1
    return tally


def recommend(answers) -> str:
    """Return 'langchain', 'crewai', or 'either' on a tie."""
    tally = score(answers)
    if tally["langchain"] == tally["crewai"]:
        return "either"
    return max(tally, key=tally.get)


def ask() -> str:
    answers = ""
    for i, item in enumerate(CHECKLIST, 1):
        while True:
            reply = input(f"{i}. {item.question} [y/n] ").strip().lower()
            if reply in ("y", "n", "yes", "no"):
                answers += reply[0]
                break
            print("   Please answer y or n.")
    return answers


def main():
    parser = argparse.ArgumentParser(description="Score the LangChain vs CrewAI checklist")
    parser.add_argument("--answers", "-a", help=f"{len(CHECKLIST)} characters of y/n, in question order")
    args = parser.parse_args()

    if args.answers is not None:
        answers = args.answers
    else:
        try:
            answers = ask()
        except EOFError:
            print("\nError: input ended before all questions were answered")
            sys.exit(1)

    try:
        tally = score(answers)
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)

    print("\n" + "=" * 60)
    print("CHECKLIST RESULT")
    print("=" * 60)
    for item, yes in zip(CHECKLIST, parse_answers(answers)):
        mark = "+" if yes else " "
        print(f"  [{mark}] {item.question} ({LABELS[item.favours]})")

    print(f"\n  LangChain: {tally['langchain']}   CrewAI: {tally['crewai']}")
    choice = recommend(answers)
    if choice == "either":
        print("  → A tie. Prototype the Researcher → Writer job in both and compare the traces.")
    else:
        print(f"  → Start with {LABELS[choice]}.")
    print("=" * 60)


if __name__ == "__main__":
    main()

"""
Session 3, Task 1: Proofread the guide
=======================================
A comparison guide goes stale quietly: a snippet stops parsing, one example
renames the Researcher, the checklist gains a ninth item. This script checks
GUIDE.md (or any Markdown file) for exactly those problems:

  1. Every fenced code block parses in its stated language
     (python → ast.parse, json → json.loads, yaml → yaml.safe_load_all;
     other languages are skipped)
  2. Every named concept (Researcher, Writer) appears in BOTH example sections
  3. The checklist has exactly eight items

Usage examples:
  python 01_proofread_guide.py                 # checks ../GUIDE.md
  python 01_proofread_guide.py path/to/other.md
  python 01_proofread_guide.py --checklist-items 10 --concept Planner --concept Writer

Exit status is 1 when any problem is found.
"""

import argparse
import ast
import json
import re
import sys
from dataclasses import dataclass
from pathlib import Path

import yaml

DEFAULT_GUIDE = Path(__file__).resolve().parent.parent / "GUIDE.md"

CONCEPTS = ("Researcher", "Writer")
EXAMPLE_SECTIONS = ("LangChain example", "CrewAI example")
CHECKLIST_HEADING = "Checklist"
CHECKLIST_ITEMS = 8

LANGUAGE_ALIASES = {
    "py": "python",
    "python3": "python",
    "yml": "yaml",
}

FENCE = re.compile(r"^ {0,3}(?P<fence>`{3,}|~{3,})\s*(?P<info>[^`]*)$")
HEADING = re.compile(r"^ {0,3}(?P<hashes>#{1,6})\s+(?P<title>.*?)\s*#*\s*$")
LIST_ITEM = re.compile(r"^(?:[-*+]|\d+[.)])\s+\S")


@dataclass
class CodeBlock:
    language: str
    code: str
    line: int      # line number of the opening fence (1-based)
    section: str   # nearest heading above the block


@dataclass
class Section:
    level: int
    title: str
    line: int
    body: str


@dataclass
class Problem:
    line: int
    message: str

    def __str__(self):
        return f"line {self.line}: {self.message}"


# ============================================================
# Markdown structure
# ============================================================

def _scan(text: str):
    """Yield (line_no, line, in_code) for every line, tracking fenced blocks."""
    fence = None
    for i, line in enumerate(text.splitlines(), 1):
        match = FENCE.match(line)
        if fence is None and match:
            fence = match.group("fence")
            yield i, line, True
        elif fence is not None:
            closing = line.strip()
            if closing.startswith(fence) and set(closing) == {fence[0]}:
                fence = None
            yield i, line, True
        else:
            yield i, line, False


def extract_code_blocks(text: str) -> list[CodeBlock]:
    """Return every fenced block. An unclosed block runs to the end of the text."""
    blocks = []
    lines = text.splitlines()
    section = ""
    i = 0
    while i < len(lines):
        line = lines[i]
        heading = HEADING.match(line)
        if heading:
            section = heading.group("title")
        match = FENCE.match(line)
        if not match:
            i += 1
            continue

        fence = match.group("fence")
        info = match.group("info").strip().split()
        language = info[0].lower() if info else ""
        start = i + 1

        body = []
        i += 1
        while i < len(lines):
            closing = lines[i].strip()
            if closing.startswith(fence) and set(closing) == {fence[0]}:
                break
            body.append(lines[i])
            i += 1
        blocks.append(CodeBlock(
            language=LANGUAGE_ALIASES.get(language, language),
            code="\n".join(body),
            line=start,
            section=section,
        ))
        i += 1

    return blocks


def split_sections(text: str) -> list[Section]:
    """Each section runs from its heading to the next heading of the same or higher level."""
    lines = text.splitlines()
    headings = []
    for i, line, in_code in _scan(text):
        if in_code:
            continue
        match = HEADING.match(line)
        if match:
            headings.append((i, len(match.group("hashes")), match.group("title")))

    sections = []
    for n, (line_no, level, title) in enumerate(headings):
        end = len(lines)
        for next_line, next_level, _ in headings[n + 1:]:
            if next_level <= level:
                end = next_line - 1
                break
        sections.append(Section(
            level=level,
            title=title,
            line=line_no,
            body="\n".join(lines[line_no:end]),
        ))
    return sections


def find_section(sections: list[Section], name: str):
    for section in sections:
        if name.lower() in section.title.lower():
            return section
    return None


# ============================================================
# Checks
# ============================================================

def check_code_blocks(blocks: list[CodeBlock]) -> list[Problem]:
    """Parse each block in its stated language; report the failing line."""
    problems = []
    for block in blocks:
        if block.language == "python":
            try:
                ast.parse(block.code)
            except SyntaxError as e:
                problems.append(Problem(block.line + (e.lineno or 1), f"python block does not parse: {e.msg}"))
        elif block.language == "json":
            try:
                json.loads(block.code)
            except json.JSONDecodeError as e:
                problems.append(Problem(block.line + e.lineno, f"json block does not parse: {e.msg}"))
        elif block.language == "yaml":
            try:
                list(yaml.safe_load_all(block.code))
            except yaml.YAMLError as e:
                mark = getattr(e, "problem_mark", None)
                offset = mark.line + 1 if mark is not None else 1
                problem = getattr(e, "problem", None) or str(e)
                problems.append(Problem(block.line + offset, f"yaml block does not parse: {problem}"))
    return problems


def check_concepts(text: str, concepts=CONCEPTS, sections=EXAMPLE_SECTIONS) -> list[Problem]:
    """Every concept must be named in every example section."""
    problems = []
    all_sections = split_sections(text)
    for name in sections:
        section = find_section(all_sections, name)
        if section is None:
            problems.append(Problem(1, f"no section titled '{name}'"))
            continue
        for concept in concepts:
            if not re.search(rf"\b{re.escape(concept)}\b", section.body):
                problems.append(Problem(
                    section.line, f"'{concept}' is not mentioned in section '{section.title}'"
                ))
    return problems


def checklist_items(text: str, heading: str = CHECKLIST_HEADING):
    """Return the top-level list items under the checklist heading, or None if it's missing."""
    section = find_section(split_sections(text), heading)
    if section is None:
        return None
    return [
        line for _, line, in_code in _scan(section.body)
        if not in_code and LIST_ITEM.match(line)
    ]


def check_checklist(text: str, expected: int = CHECKLIST_ITEMS, heading: str = CHECKLIST_HEADING) -> list[Problem]:
    items = checklist_items(text, heading)
    if items is None:
        return [Problem(1, f"no section titled '{heading}'")]
    if len(items) != expected:
        section = find_section(split_sections(text), heading)
        return [Problem(section.line, f"checklist has {len(items)} items, expected {expected}")]
    return []


def proofread(
    path,
    concepts=CONCEPTS,
    sections=EXAMPLE_SECTIONS,
    checklist_size: int = CHECKLIST_ITEMS,
) -> list[Problem]:
    text = Path(path).read_text(encoding="utf-8")
    problems = check_code_blocks(extract_code_blocks(text))
    problems += check_concepts(text, concepts, sections)
    problems += check_checklist(text, checklist_size)
    return sorted(problems, key=lambda p: p.line)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Proofread a framework comparison guide")
    parser.add_argument("path", nargs="?", default=str(DEFAULT_GUIDE), help="Markdown file to check")
    parser.add_argument("--concept", action="append", dest="concepts",
                        help=f"Concept that must appear in every example section (default: {', '.join(CONCEPTS)})")
    parser.add_argument("--checklist-items", type=int, default=CHECKLIST_ITEMS)
    args = parser.parse_args(argv)

    path = Path(args.path)
    if not path.is_file():
        print(f"Error: {path} not found")
        return 1

    problems = proofread(path, concepts=tuple(args.concepts or CONCEPTS), checklist_size=args.checklist_items)

    if not problems:
        blocks = extract_code_blocks(path.read_text(encoding="utf-8"))
        print(f"OK: {path.name} ({len(blocks)} code blocks, checklist of {args.checklist_items})")
        return 0

    print(f"{path.name}: {len(problems)} problem(s)")
    for problem in problems:
        print(f"  {problem}")
    return 1


if __name__ == "__main__":
    sys.exit(main())

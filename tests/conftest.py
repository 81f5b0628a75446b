"""
Shared pytest configuration for the lab scripts.

The labs are numbered scripts (01_concepts.py, ...), which are not valid
module names, so they are loaded by path.
"""

import importlib.util
import os
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent

# Framework clients read these at construction time; no test talks to an API.
os.environ.setdefault("ANTHROPIC_API_KEY", "test-key")
os.environ.setdefault("OPENAI_API_KEY", "test-key")
os.environ.setdefault("CREWAI_DISABLE_TELEMETRY", "true")
os.environ.setdefault("CREWAI_TRACING_ENABLED", "false")
os.environ.setdefault("OTEL_SDK_DISABLED", "true")


def load_script(relative_path: str):
    """Import a lab script by its path relative to the repo root."""
    path = ROOT / relative_path
    name = "lab_" + relative_path.replace("/", "_").replace("-", "_").removesuffix(".py")
    if name in sys.modules:
        return sys.modules[name]

    spec = importlib.util.spec_from_file_location(name, path)
    module = importlib.util.module_from_spec(spec)
    sys.modules[name] = module
    spec.loader.exec_module(module)
    return module


@pytest.fixture(scope="session")
def guide_path():
    return ROOT / "GUIDE.md"


@pytest.fixture(scope="session")
def guide_text(guide_path):
    return guide_path.read_text(encoding="utf-8")


@pytest.fixture(scope="session")
def concepts():
    return load_script("session-01/01_concepts.py")


@pytest.fixture(scope="session")
def tool_routing():
    return load_script("session-01/02_langchain_tool_routing.py")


@pytest.fixture(scope="session")
def prompting():
    return load_script("session-02/01_prompting_comparison.py")


@pytest.fixture(scope="session")
def failure_modes():
    return load_script("session-02/02_failure_modes.py")


@pytest.fixture(scope="session")
def checklist():
    return load_script("session-02/03_checklist.py")


@pytest.fixture(scope="session")
def summary():
    return load_script("session-02/04_summary.py")


@pytest.fixture(scope="session")
def proofreader():
    return load_script("session-03/01_proofread_guide.py")

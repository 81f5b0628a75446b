"""
Tests for the CrewAI crew lab. Only the crew's structure is checked;
kickoff() would call the model, so it is never run here.
"""

import pytest

pytest.importorskip("crewai")

from crewai import Process

from conftest import load_script


@pytest.fixture(scope="module")
def crew_lab():
    return load_script("session-01/03_crewai_crew.py")


@pytest.fixture(scope="module")
def crew(crew_lab):
    return crew_lab.build_crew()


class TestNotes:

    def test_lookup_notes(self, crew_lab):
        assert "CrewAI docs" in crew_lab.lookup_notes("What is CrewAI?")
        assert "AutoGen" in crew_lab.lookup_notes("multi agent systems")
        assert "structured schema" in crew_lab.lookup_notes("tool")
        assert "no specific sources found" in crew_lab.lookup_notes("gardening")

    def test_search_notes_tool(self, crew_lab):
        assert crew_lab.search_notes.name == "Search notes"
        assert "sources" in crew_lab.search_notes.description


class TestCrewStructure:

    def test_agents_are_researcher_then_writer(self, crew):
        assert [a.role for a in crew.agents] == ["Researcher", "Writer"]

    def test_only_researcher_has_tools(self, crew):
        researcher, writer = crew.agents
        assert [t.name for t in researcher.tools] == ["Search notes"]
        assert not writer.tools

    def test_tasks_assigned_in_order(self, crew):
        research, write = crew.tasks
        assert research.agent.role == "Researcher"
        assert write.agent.role == "Writer"

    def test_writer_task_gets_research_as_context(self, crew):
        research, write = crew.tasks
        assert write.context == [research]

    def test_writer_task_returns_article(self, crew, crew_lab):
        assert crew.tasks[1].output_pydantic is crew_lab.Article

    def test_sequential_process(self, crew):
        assert crew.process == Process.sequential

    def test_topic_placeholder_in_task_descriptions(self, crew):
        for task in crew.tasks:
            assert "{topic}" in task.description


class TestArticle:

    def test_sources_default_to_empty(self, crew_lab):
        article = crew_lab.Article(title="Agents", body="Text")
        assert article.sources == []

"""
Tests for the concepts, checklist and summary labs
"""

import sys

import pytest


class TestConcepts:

    def test_glossary_terms(self, concepts):
        assert list(concepts.CONCEPTS) == ["Agent", "Tool", "Task", "Crew"]
        for entry in concepts.CONCEPTS.values():
            assert set(entry) == {"meaning", "langchain", "crewai"}

    def test_describe_is_case_insensitive(self, concepts):
        text = concepts.describe("  crew ")
        assert text.startswith("Crew: A group of agents and tasks")
        assert "LangChain:" in text and "CrewAI:" in text

    def test_unknown_term_lists_known_terms(self, concepts):
        with pytest.raises(KeyError) as exc:
            concepts.describe("Pipeline")
        assert "Agent, Tool, Task, Crew" in exc.value.args[0]


class TestChecklist:

    def test_exactly_eight_balanced_items(self, checklist):
        favours = [item.favours for item in checklist.CHECKLIST]
        assert len(favours) == 8
        assert favours.count("langchain") == favours.count("crewai") == 4

    def test_invalid_favours_rejected(self, checklist):
        with pytest.raises(ValueError):
            checklist.ChecklistItem(question="Q?", favours="autogen")

    def test_score_from_string(self, checklist):
        # questions 1, 4, 5, 7 favour LangChain
        assert checklist.score("ynnyynyn") == {"langchain": 4, "crewai": 0}
        assert checklist.score("NYYNNYNY") == {"langchain": 0, "crewai": 4}

    def test_score_from_booleans(self, checklist):
        assert checklist.score([True] * 8) == {"langchain": 4, "crewai": 4}
        assert checklist.score([False] * 8) == {"langchain": 0, "crewai": 0}

    @pytest.mark.parametrize("answers, expected", [
        ("ynnyynyn", "langchain"),
        ("nyynnyny", "crewai"),
        ("yyyyyyyy", "either"),
        ("nnnnnnnn", "either"),
        ("yynnnnnn", "either"),
        ("yyynnnnn", "crewai"),
    ])
    def test_recommend(self, checklist, answers, expected):
        assert checklist.recommend(answers) == expected

    def test_wrong_length(self, checklist):
        with pytest.raises(ValueError, match="Expected 8 answers, got 3"):
            checklist.score("yyn")
        with pytest.raises(ValueError, match="Expected 8 answers"):
            checklist.score([True] * 9)

    def test_bad_characters(self, checklist):
        with pytest.raises(ValueError, match="'y' or 'n'"):
            checklist.score("yyyyyyy?")

    def test_non_boolean_answers_rejected(self, checklist):
        with pytest.raises(ValueError, match="True or False"):
            checklist.score(["n"] * 8)
        with pytest.raises(ValueError, match="True or False"):
            checklist.score([1, 0, 0, 0, 0, 0, 0, 0])

    def test_cli_answers(self, checklist, monkeypatch, capsys):
        monkeypatch.setattr(sys, "argv", ["03_checklist.py", "--answers", "ynnyynyn"])
        checklist.main()
        out = capsys.readouterr().out

        assert "LangChain: 4   CrewAI: 0" in out
        assert "Start with LangChain." in out

    def test_cli_bad_answers_exit_1(self, checklist, monkeypatch, capsys):
        monkeypatch.setattr(sys, "argv", ["03_checklist.py", "-a", "yes"])
        with pytest.raises(SystemExit) as exc:
            checklist.main()

        assert exc.value.code == 1
        assert "Error:" in capsys.readouterr().out

    def test_interactive_reprompts(self, checklist, monkeypatch):
        replies = iter(["maybe", "y", "n", "n", "yes", "y", "no", "y", "n"])
        monkeypatch.setattr("builtins.input", lambda prompt: next(replies))

        assert checklist.ask() == "ynnyynyn"

    def test_interactive_input_ends_early(self, checklist, monkeypatch, capsys):
        def closed_stdin(prompt):
            raise EOFError

        monkeypatch.setattr(sys, "argv", ["03_checklist.py"])
        monkeypatch.setattr("builtins.input", closed_stdin)
        with pytest.raises(SystemExit) as exc:
            checklist.main()

        assert exc.value.code == 1
        assert "Error: input ended" in capsys.readouterr().out


class TestSummary:

    def test_table_lines_have_equal_width(self, summary):
        lines = summary.render_table(summary.ROWS).splitlines()

        assert len(lines) == len(summary.ROWS) + 4
        assert len({len(line) for line in lines}) == 1
        assert lines[0].startswith("┌") and lines[-1].endswith("┘")

    def test_table_contains_entry_points(self, summary):
        table = summary.render_table(summary.ROWS)
        assert "run(task)" in table
        assert "crew.kickoff(inputs)" in table

    def test_column_width_fits_longest_cell(self, summary):
        table = summary.render_table([("a", "bb", "a much longer cell")], headers=("x", "y", "z"))
        header = table.splitlines()[1]
        assert header == "│ x │ y  │ z                  │"

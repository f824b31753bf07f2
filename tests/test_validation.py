"""
Tests for question completeness.
"""

from survey_builder.model import Option, Question, QuestionType
from survey_builder.validation import can_add_question, find_incomplete, is_complete


def mc(label, *texts):
    options = tuple(Option(id=f"o{i}", text=t) for i, t in enumerate(texts))
    return Question(id="q", label=label, type=QuestionType.MULTIPLE_CHOICE, options=options)


class TestTextQuestion:

    def test_label_required(self):
        assert not is_complete(Question(id="q", label=""))

    def test_whitespace_label_is_empty(self):
        """Should trim the label before checking."""
        assert not is_complete(Question(id="q", label="   \t"))

    def test_filled_label(self):
        assert is_complete(Question(id="q", label="Name?"))

    def test_stale_options_ignored(self):
        """Should ignore leftover blank options on a text question."""
        q = Question(id="q", label="Name?", options=(Option("o1", ""),))
        assert is_complete(q)


class TestMultipleChoiceQuestion:

    def test_all_filled(self):
        assert is_complete(mc("Pick", "A", "B"))

    def test_one_blank_option(self):
        """Scenario: 3 options, 2 filled and 1 empty -> incomplete."""
        assert not is_complete(mc("Pick", "A", "B", ""))

    def test_whitespace_option(self):
        assert not is_complete(mc("Pick", "A", "  "))

    def test_blank_label(self):
        assert not is_complete(mc(" ", "A", "B"))

    def test_zero_options_counts_as_complete(self):
        """Should not check the option count."""
        assert is_complete(mc("Pick"))


class TestGate:

    def test_empty_list_allows_add(self):
        assert can_add_question([])

    def test_find_incomplete_keeps_order(self):
        questions = [
            Question(id="a", label=""),
            Question(id="b", label="ok"),
            Question(id="c", label=""),
        ]
        assert [q.id for q in find_incomplete(questions)] == ["a", "c"]
        assert not can_add_question(questions)

    def test_all_complete_allows_add(self):
        assert can_add_question([Question(id="a", label="ok"), mc("Pick", "A")])

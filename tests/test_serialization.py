"""
Tests for serialization and deserialization of survey builder objects.

These tests ensure lossless JSON/YAML round-trip using the explicit
serialization functions in `survey_builder.serialization`, and the
error reporting of strict parsing.
"""

import json
import random

import pytest
from survey_builder.actions import (
    AddOption,
    AddQuestion,
    ChangeType,
    MoveUp,
    UpdateOption,
    UpdateQuestion,
)
from survey_builder.model import MultipleChoiceResponse, Option, Question, QuestionType
from survey_builder.reducer import apply_action, reduce_actions
from survey_builder.responses import ResponseStore
from survey_builder.serialization import (
    SurveyParseError,
    format_parse_error,
    parse_survey_definition,
    parse_survey_response,
    responses_from_json,
    responses_to_dict,
    responses_to_json,
    survey_from_dict,
    survey_from_json,
    survey_from_yaml,
    survey_to_dict,
    survey_to_json,
    survey_to_yaml,
    validate_survey_definition,
    validate_survey_response,
)


def build_sample_questions(ids):
    return reduce_actions((), [
        AddQuestion("q1"),
        UpdateQuestion("q1", label="Name?", required=True),
        AddQuestion("q2"),
        ChangeType("q2", QuestionType.MULTIPLE_CHOICE),
        UpdateQuestion("q2", label="Colour?"),
        AddOption("q2"),
        MoveUp("q2"),
    ], ids)


def sample_document():
    return {
        "questions": [
            {
                "id": "q1",
                "label": "Colour?",
                "type": "multipleChoice",
                "required": False,
                "options": [{"id": "a", "text": "Red"}, {"id": "b", "text": "Blue"}],
            },
            {"id": "q2", "label": "Name?", "type": "text", "required": True, "options": []},
        ]
    }


class TestSurveyRoundTrip:

    def test_json_roundtrip(self, ids):
        questions = build_sample_questions(ids)
        restored = survey_from_json(survey_to_json(questions))
        assert restored == questions

    def test_yaml_roundtrip(self, ids):
        questions = build_sample_questions(ids)
        restored = survey_from_yaml(survey_to_yaml(questions))
        assert restored == questions

    def test_json_text_is_stable(self):
        """Should re-serialize parsed output to identical text."""
        text = survey_to_json(survey_from_dict(sample_document()))
        assert survey_to_json(survey_from_json(text)) == text

    def test_document_shape(self, ids):
        data = survey_to_dict(build_sample_questions(ids))
        assert list(data) == ["questions"]
        first = data["questions"][0]
        assert set(first) == {"id", "label", "type", "required", "options"}
        assert first["type"] == "multipleChoice"
        assert all(set(o) == {"id", "text"} for o in first["options"])

    def test_order_preserved(self, ids):
        questions = build_sample_questions(ids)
        data = json.loads(survey_to_json(questions))
        assert [q["id"] for q in data["questions"]] == ["q2", "q1"]

    def test_stale_options_survive_roundtrip(self):
        q = Question(id="q1", label="Now text", options=(Option("a", "old"),))
        assert survey_from_json(survey_to_json([q])) == (q,)

    def test_indent(self):
        text = survey_to_json([Question(id="q1")], indent=2)
        assert "\n  " in text

    def test_empty_yaml(self):
        assert survey_from_yaml("") == ()

    def test_roundtrip_after_every_action(self, ids, random_action):
        """Should round-trip any list reached by a sequence of actions."""
        rng = random.Random(11)
        state = ()
        for _ in range(200):
            state = apply_action(state, random_action(rng, state), ids)
            assert survey_from_json(survey_to_json(state)) == state
            assert survey_from_yaml(survey_to_yaml(state)) == state


class TestResponseRoundTrip:

    def test_json_roundtrip(self):
        store = ResponseStore({
            "q1": "Ada",
            "q2": MultipleChoiceResponse(option_id="a", option_text="Red"),
        })
        restored = responses_from_json(responses_to_json(store))
        assert restored == store

    def test_wire_shape(self):
        store = ResponseStore({"q2": MultipleChoiceResponse(option_id="a", option_text="Red")})
        assert responses_to_dict(store) == {"q2": {"optionId": "a", "optionText": "Red"}}

    def test_unsupported_value(self):
        with pytest.raises(TypeError):
            responses_to_dict(ResponseStore({"q1": 42}))


class TestParseSurveyDefinition:

    def test_valid_document(self):
        questions = parse_survey_definition(sample_document())
        assert questions[0].type == QuestionType.MULTIPLE_CHOICE
        assert questions[1].required is True

    def test_not_an_object(self):
        with pytest.raises(SurveyParseError):
            parse_survey_definition([])

    def test_missing_questions(self):
        with pytest.raises(SurveyParseError) as excinfo:
            parse_survey_definition({})
        assert excinfo.value.issues == [(("questions",), "Field required")]

    def test_collects_every_issue(self):
        doc = sample_document()
        doc["questions"][0]["type"] = "rating"
        doc["questions"][1]["required"] = "yes"
        del doc["questions"][1]["label"]
        with pytest.raises(SurveyParseError) as excinfo:
            parse_survey_definition(doc)
        paths = [path for path, _ in excinfo.value.issues]
        assert ("questions", 0, "type") in paths
        assert ("questions", 1, "required") in paths
        assert ("questions", 1, "label") in paths

    def test_multiple_choice_needs_an_option(self):
        doc = sample_document()
        doc["questions"][0]["options"] = []
        ok, error = validate_survey_definition(doc)
        assert not ok
        assert format_parse_error(error) == (
            "questions.0.options: Multiple choice questions must have at least one option"
        )

    def test_bad_option(self):
        doc = sample_document()
        doc["questions"][0]["options"][1] = {"id": 3, "text": "x"}
        with pytest.raises(SurveyParseError) as excinfo:
            parse_survey_definition(doc)
        assert excinfo.value.issues[0][0] == ("questions", 0, "options", 1, "id")

    def test_validate_ok(self):
        assert validate_survey_definition(sample_document()) == (True, None)


class TestParseSurveyResponse:

    @pytest.fixture
    def questions(self):
        return parse_survey_definition(sample_document())

    def test_valid_response(self, questions):
        data = {"q1": {"optionId": "b", "optionText": "Blue"}, "q2": "Ada"}
        store = parse_survey_response(data, questions)
        assert store.get("q1") == MultipleChoiceResponse("b", "Blue")
        assert store.get("q2") == "Ada"

    def test_unknown_question(self, questions):
        with pytest.raises(SurveyParseError) as excinfo:
            parse_survey_response({"zzz": "x"}, questions)
        assert "not found in survey definition" in str(excinfo.value)

    def test_string_for_multiple_choice(self, questions):
        ok, error = validate_survey_response({"q1": "Blue"}, questions)
        assert not ok
        assert error.issues[0][0] == ("q1",)

    def test_unknown_option(self, questions):
        with pytest.raises(SurveyParseError) as excinfo:
            parse_survey_response({"q1": {"optionId": "z", "optionText": "Blue"}}, questions)
        assert excinfo.value.issues[0][0] == ("q1", "optionId")

    def test_option_text_mismatch(self, questions):
        with pytest.raises(SurveyParseError) as excinfo:
            parse_survey_response({"q1": {"optionId": "b", "optionText": "Navy"}}, questions)
        assert format_parse_error(excinfo.value) == (
            'q1.optionText: Option text mismatch. Expected "Blue", got "Navy"'
        )

    def test_structure_for_text(self, questions):
        with pytest.raises(SurveyParseError) as excinfo:
            parse_survey_response({"q2": {"optionId": "a", "optionText": "Red"}}, questions)
        assert "Text question must have string response" in str(excinfo.value)

    def test_wrong_value_shape(self, questions):
        with pytest.raises(SurveyParseError):
            parse_survey_response({"q2": 5}, questions)

    def test_validate_ok(self, questions):
        assert validate_survey_response({}, questions) == (True, None)

#!/usr/bin/env python3
"""
Builder Session Demo: Build → Gate → Preview → Export

Shows the full workflow:
1. Start from the starter survey
2. Add and fill in questions (including a refused add)
3. Answer them as the preview surface would
4. Export the survey and responses as JSON and YAML
"""

import logging

from survey_builder.actions import AddOption, ChangeType, MoveUp, UpdateOption, UpdateQuestion
from survey_builder.examples import create_initial_questions
from survey_builder.model import QuestionType, question_type_tag, required_label
from survey_builder.serialization import (
    parse_survey_response,
    responses_to_json,
    responses_to_dict,
    survey_to_json,
    survey_to_yaml,
)
from survey_builder.session import SurveySession, is_complete


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    session = SurveySession(create_initial_questions())

    print("=" * 80)
    print("BUILDER SESSION DEMO: Build → Gate → Preview → Export")
    print("=" * 80)

    # =========================================================================
    # STEP 1: Build
    # =========================================================================
    print("\n1. BUILDING QUESTIONS...")
    name_id = session.add_question()
    session.dispatch(UpdateQuestion(name_id, label="What is your name?", required=True))
    print(f"   ✓ Added {name_id}")

    colour_id = session.add_question()
    session.dispatch(ChangeType(colour_id, QuestionType.MULTIPLE_CHOICE))

    # =========================================================================
    # STEP 2: Gate
    # =========================================================================
    print("\n2. TRYING TO ADD WHILE A QUESTION IS INCOMPLETE...")
    refused = session.add_question()
    print(f"   ✓ Refused: {refused is None} ({session.banner.message})")
    session.banner.dismiss()

    colour = session.get_question(colour_id)
    session.dispatch(UpdateQuestion(colour_id, label="Favourite colour?"))
    for option, text in zip(colour.options, ["Red", "Green"]):
        session.dispatch(UpdateOption(colour_id, option.id, text))
    session.dispatch(AddOption(colour_id))
    new_option = session.get_question(colour_id).options[-1]
    session.dispatch(UpdateOption(colour_id, new_option.id, "Blue"))
    session.dispatch(MoveUp(colour_id))

    for index, question in enumerate(session.questions, 1):
        status = "complete" if is_complete(question) else "incomplete"
        print(f"   {index}. [{question_type_tag(question.type)}] {question.label} "
              f"({required_label(question.required)}, {status})")

    # =========================================================================
    # STEP 3: Preview
    # =========================================================================
    print("\n3. ANSWERING IN PREVIEW...")
    session.responses.set_text(name_id, "Ada")
    colour = session.get_question(colour_id)
    session.responses.choose_option(colour, colour.options[2].id)
    parse_survey_response(responses_to_dict(session.responses), session.questions)
    print(f"   ✓ Answered {len(session.responses)} question(s)")

    # =========================================================================
    # STEP 4: Export
    # =========================================================================
    print("\n4. SURVEY JSON:")
    print("-" * 80)
    print(survey_to_json(session.questions, indent=2))
    print("\n   SURVEY YAML:")
    print("-" * 80)
    print(survey_to_yaml(session.questions))
    print("   RESPONSES JSON:")
    print("-" * 80)
    print(responses_to_json(session.responses, indent=2))
    print("=" * 80)


if __name__ == "__main__":
    main()

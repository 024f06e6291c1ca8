from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping


HELP_PHONE = "0330 113 1333"
_IMAGE_ROOT = (
    "https://origin-gph.com/wp-content/themes/generatepress_child/"
    "boiler-setup/quote-img"
)


@dataclass(frozen=True, slots=True)
class QuestionOption:
    value: str
    label: str
    image: str | None = None


@dataclass(frozen=True, slots=True)
class Question:
    id: str
    question: str
    options: tuple[QuestionOption, ...]
    hint: str | None = None
    info: str | None = None
    help_phone: str | None = None

    def option(self, value: str) -> QuestionOption | None:
        for option in self.options:
            if option.value == value:
                return option
        return None


@dataclass(slots=True)
class AnswerValidationResult:
    problems: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.problems


def _yes_no(yes: str, no: str) -> tuple[QuestionOption, ...]:
    return (QuestionOption("yes", yes), QuestionOption("no", no))


QUESTIONS: tuple[Question, ...] = (
    Question(
        id="boiler-fuel",
        question="Which fuel powers your boiler?",
        options=(
            QuestionOption("mains-gas", "Mains Gas", f"{_IMAGE_ROOT}/mains-gas_1.png"),
            QuestionOption("lpg", "LPG", f"{_IMAGE_ROOT}/lpg.png"),
            QuestionOption("other", "Other", f"{_IMAGE_ROOT}/unknown.png"),
            QuestionOption("other-2", "Other 2", f"{_IMAGE_ROOT}/unknown.png"),
        ),
        info=(
            "Mains gas boilers are most common across the UK. If you have a gas "
            "meter, a gas bill, or a gas cooker, your boiler probably runs on gas."
        ),
        help_phone=HELP_PHONE,
    ),
    Question(
        id="boiler-type-known",
        question="Do you know what type of boiler you currently have?",
        hint="Like, a combi boiler, regular boiler etc",
        options=_yes_no("Yes, I know", "No, I'm not sure"),
        info=(
            "If you know, select yes. If you don't, select that you're not sure "
            "and we'll figure it out for you in the next step."
        ),
        help_phone=HELP_PHONE,
    ),
    Question(
        id="boiler-type",
        question="Which type of boiler do you currently have?",
        options=(
            QuestionOption("combi", "Combi boiler"),
            QuestionOption("regular", "Regular/Standard boiler"),
            QuestionOption("system", "System boiler"),
            QuestionOption("back", "Back boiler"),
        ),
        info=(
            "Combi boilers are the most common type of boiler in the UK. "
            "Regular/system boilers have separate tanks/cylinders, and back "
            "boilers are found behind fireplaces."
        ),
    ),
    Question(
        id="same-location",
        question="Do you want to keep boiler in the same place?",
        options=_yes_no("Yes, I do", "No, I want to move it"),
        info=(
            "Boiler relocations can be quite tricky, making your job more costly "
            "and complex. If you wish to relocate it, select no, and you'll see "
            "the pricing options on the next page."
        ),
    ),
    Question(
        id="property-type",
        question="Which type of property do you have?",
        options=(
            QuestionOption("house", "A house"),
            QuestionOption("bungalow", "A bungalow"),
            QuestionOption("flat", "A flat/apartment"),
        ),
        info=(
            "This helps us to size your boiler, and also understand access for "
            "things such as your boiler's flue."
        ),
    ),
    Question(
        id="bathrooms",
        question="How many bathrooms does your home have?",
        options=(
            QuestionOption("1", "1 bathroom"),
            QuestionOption("2", "2 bathrooms"),
            QuestionOption("3", "3 bathrooms"),
            QuestionOption("4+", "4+ bathrooms"),
        ),
        info=(
            "This helps us to calculate the required power for your new boiler. "
            "The more bathrooms you have, the more powerful your boiler will "
            "need to be."
        ),
    ),
    Question(
        id="bedrooms",
        question="How many bedrooms does your home have?",
        options=(
            QuestionOption("1", "1 bedroom"),
            QuestionOption("2", "2 bedrooms"),
            QuestionOption("3", "3 bedrooms"),
            QuestionOption("4+", "4+ bedrooms"),
        ),
        info=(
            "This helps us to understand the size of your home, which then helps "
            "our system to size your boiler correctly."
        ),
    ),
    Question(
        id="wall-flue",
        question="Does your boiler's flue go out of the wall?",
        hint="It'll look a little something like this...",
        options=_yes_no("Yes, it does", "No, it doesn't"),
        info=(
            "Most flues go horizontally, out of the wall. They can either be "
            "round tubes popping out (modern, fanned flue), or, square shaped "
            "ones (balanced flue). Don't confuse your flue with your chimney."
        ),
    ),
    Question(
        id="flue-distance",
        question="Is your flue more than 30cm away from an opening window, or door?",
        hint="Flue distance",
        options=_yes_no("Yes, it is", "No, it isn't"),
        info=(
            "This includes any opening, like vents, doors, or opening windows. "
            "If it's near a window that doesn't open, select no."
        ),
    ),
    Question(
        id="water-meter",
        question="Does your home have a water meter?",
        options=_yes_no("Yes, it does", "No, it doesn't"),
        info=(
            "If you have a water meter, you'll pay for the water you use, rather "
            "than a fixed monthly cost on your bill"
        ),
    ),
)

_BY_ID: dict[str, Question] = {question.id: question for question in QUESTIONS}


def get_question(question_id: str) -> Question | None:
    return _BY_ID.get(question_id)


def next_question(answers: Mapping[str, str]) -> Question | None:
    """Return the first question without an answer; the form is strictly linear."""

    for question in QUESTIONS:
        if not answers.get(question.id):
            return question
    return None


def progress(answers: Mapping[str, str]) -> float:
    answered = sum(1 for question in QUESTIONS if answers.get(question.id))
    return round(answered / len(QUESTIONS) * 100, 1)


def validate_answers(answers: Mapping[str, str]) -> AnswerValidationResult:
    result = AnswerValidationResult()

    for question_id in answers:
        if question_id not in _BY_ID:
            result.problems.append(f"Unknown question '{question_id}'")

    for question in QUESTIONS:
        value = answers.get(question.id)
        if not value:
            result.problems.append(f"Missing answer for '{question.id}'")
        elif question.option(value) is None:
            result.problems.append(
                f"Invalid answer '{value}' for '{question.id}'"
            )

    return result

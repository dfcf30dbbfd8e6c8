"""In-memory question store for testing.

Questions are only touched through their score, so there is no domain
repository for them; the in-memory score repository reads and writes this
store directly.
"""

from typing import Optional

from paracosm.domain.model.question import Question
from paracosm.domain.value import QuestionId


class InMemoryQuestionRepository:
    """Question records keyed by ID."""

    def __init__(self) -> None:
        self._questions: dict[QuestionId, Question] = {}

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID."""
        return self._questions.get(question_id)

    async def find_ids(self) -> list[QuestionId]:
        """List every stored question ID."""
        return list(self._questions)

    async def save(self, question: Question) -> Question:
        """Save or update a question."""
        self._questions[question.id] = question
        return question

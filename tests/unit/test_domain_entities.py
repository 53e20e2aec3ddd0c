"""
Unit tests for domain entities.
"""

import pytest

from edumorph.application.prompts import LearningRoadmap, QuizQuestion
from edumorph.domain.entities import (
    ChatMessage,
    RoadmapProgress,
    build_conversation_context,
    score_quiz,
)
from edumorph.domain.exceptions import MilestoneNotFound


@pytest.fixture
def questions(quiz_payload):
    return [QuizQuestion.model_validate(item) for item in quiz_payload]


@pytest.fixture
def progress(roadmap_payload):
    return RoadmapProgress.from_roadmap(LearningRoadmap.model_validate(roadmap_payload))


class TestScoreQuiz:
    def test_all_correct(self, questions):
        result = score_quiz(questions, [1, 1], "algorithms", "medium", time_taken=42)

        assert result.score == 2
        assert result.total_questions == 2
        assert result.percentage == 100
        assert result.passed is True
        assert result.time_taken == 42

    def test_unanswered_and_wrong(self, questions):
        result = score_quiz(questions, [None, 3], "algorithms", "medium")

        assert result.score == 0
        assert result.percentage == 0
        assert result.passed is False

    def test_short_answer_list_is_padded(self, questions):
        result = score_quiz(questions, [1], "algorithms", "medium")

        assert result.answers == [1, None]
        assert result.score == 1
        assert result.percentage == 50

    def test_extra_answers_are_ignored(self, questions):
        result = score_quiz(questions, [1, 1, 0, 2], "algorithms", "medium")

        assert result.answers == [1, 1]
        assert result.score == 2

    def test_percentage_is_rounded(self, quiz_payload):
        items = quiz_payload + [dict(quiz_payload[0])]
        questions = [QuizQuestion.model_validate(item) for item in items]

        result = score_quiz(questions, [1, 1, 0], "algorithms", "medium")

        assert result.percentage == 67
        assert result.passed is True

    def test_no_questions(self):
        result = score_quiz([], [], "algorithms", "medium")

        assert result.score == 0
        assert result.percentage == 0


class TestRoadmapProgress:
    def test_from_roadmap(self, progress):
        assert progress.title == "Customized Learning Path for Python"
        assert progress.total_days == 30
        assert [m.id for m in progress.milestones] == ["milestone-1", "milestone-2"]
        assert progress.milestones[0].topics == ["Variables", "Control flow", "Functions"]
        assert progress.completed_count == 0
        assert progress.progress_percentage == 0.0

    def test_toggle(self, progress):
        milestone = progress.toggle("milestone-2")

        assert milestone.completed is True
        assert progress.completed_count == 1
        assert progress.progress_percentage == 50.0
        assert progress.updated_at is not None

        progress.toggle("milestone-2")
        assert progress.completed_count == 0

    def test_toggle_unknown_milestone(self, progress):
        with pytest.raises(MilestoneNotFound) as exc_info:
            progress.toggle("milestone-9")

        assert exc_info.value.milestone_id == "milestone-9"

    def test_empty_roadmap_progress(self):
        progress = RoadmapProgress(
            title="Empty", description="", category="General", total_days=0
        )

        assert progress.total_milestones == 0
        assert progress.progress_percentage == 0.0


class TestConversationContext:
    def test_last_messages_only(self):
        messages = [
            ChatMessage(content="What is a list?", is_user=True),
            ChatMessage(content="An ordered collection.", is_user=False),
            ChatMessage(content="And a tuple?", is_user=True),
            ChatMessage(content="An immutable list.", is_user=False),
        ]

        context = build_conversation_context(messages, limit=3)

        assert context == (
            "Tutor: An ordered collection.\n"
            "Student: And a tuple?\n"
            "Tutor: An immutable list."
        )

    def test_empty_history(self):
        assert build_conversation_context([]) == ""

    def test_zero_limit(self):
        messages = [ChatMessage(content="hi", is_user=True)]

        assert build_conversation_context(messages, limit=0) == ""

"""
Learning option value objects - the enumerated choices offered to learners.

The generation pipeline accepts plain strings for all of these; the enums
describe the supported set that callers validate against before invoking it.
"""

from enum import Enum


class ExplanationDepth(str, Enum):
    TLDR = "tldr"
    ELI5 = "eli5"
    DEEPDIVE = "deepdive"


class ToneMode(str, Enum):
    """Narration style for concept explanations."""

    DEFAULT = "default"
    GAMER = "gamer"
    CHEF = "chef"
    RAPPER = "rapper"
    PIRATE = "pirate"
    SCIENTIST = "scientist"


class Persona(str, Enum):
    """Audience lens for application-vision answers."""

    DEFAULT = "default"
    ENGINEER = "engineer"
    DESIGNER = "designer"
    RESEARCHER = "researcher"
    ENTREPRENEUR = "entrepreneur"


class QuizDifficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class SkillLevel(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class TimeCommitment(str, Enum):
    PART_TIME = "part-time"
    FULL_TIME = "full-time"

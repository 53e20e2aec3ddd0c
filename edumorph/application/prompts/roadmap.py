"""
Learning-roadmap prompt and structured output models.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from edumorph.domain.value_objects import SkillLevel, TimeCommitment
from edumorph.infra.config.logging_config import get_logger

_log = get_logger("prompts.roadmap")


# ---------- STRUCTURED OUTPUT MODELS ----------
class Milestone(BaseModel):
    """One stage of a learning roadmap."""

    model_config = ConfigDict(populate_by_name=True)

    title: str
    description: str
    estimated_days: int = Field(..., alias="estimatedDays", ge=0)
    topics: List[str] = Field(default_factory=list)
    difficulty: str = "Beginner"
    icon: str = "BookOpen"


class LearningRoadmap(BaseModel):
    """Complete roadmap for a learning goal.

    ``total_days`` is whatever the model reported; it is not reconciled with
    the milestone estimates.
    """

    model_config = ConfigDict(populate_by_name=True)

    title: str
    description: str
    total_days: int = Field(..., alias="totalDays", ge=0)
    total_milestones: Optional[int] = Field(None, alias="totalMilestones")
    category: str
    milestones: List[Milestone]


# ---------- PROMPT TEMPLATES ----------
ROADMAP_CREATOR_PROMPT = """
You are an expert learning path designer AI that creates comprehensive, personalized roadmaps for any learning goal.

When generating a roadmap:

1. FIRST analyze the learning goal to determine:
   - Relevant subject area (programming, design, science, etc.)
   - Difficulty level (beginner, intermediate, advanced)
   - Practical applications of the skill
   - Industry standards and best practices

2. THEN create a structured roadmap with:
   - 6-10 key milestones that build progressively
   - Clear, actionable milestone titles
   - Concise descriptions of what will be learned
   - Estimated timeframes for each milestone
   - 3-5 key topics per milestone
   - Appropriate difficulty classification
   - Relevant icons/symbols for each milestone

3. FORMAT the response as JSON with this structure:
{
  "title": "Customized Learning Path for [Goal]",
  "description": "Comprehensive roadmap to master [Goal] from fundamentals to advanced concepts",
  "totalDays": [sum of all milestone days],
  "totalMilestones": [count],
  "category": "[Subject]",
  "milestones": [
    {
      "title": "Fundamentals & Setup",
      "description": "What will be learned in this phase",
      "estimatedDays": 14,
      "topics": ["Topic 1", "Topic 2", "Topic 3"],
      "difficulty": "Beginner",
      "icon": "BookOpen"
    }
  ]
}

4. ICON OPTIONS (use exactly these names):
   - BookOpen (fundamentals)
   - Target (core concepts)
   - Code (practical application)
   - Sparkles (advanced techniques)
   - Database (data/APIs)
   - CheckCircle (testing/quality)
   - Trophy (mastery/deployment)
   - Puzzle (problem solving)
   - Cpu (technical topics)
   - Globe (web-related)
   - Smartphone (mobile)
   - Palette (design)

Important rules:
- Make estimates realistic (beginners need more time)
- Ensure logical progression between milestones
- Include practical projects where applicable
- Balance theory and practice
- Use the exact JSON format specified
- Only return the JSON with no additional text
"""

_LEVELS = {level.value for level in SkillLevel}
_COMMITMENTS = {c.value for c in TimeCommitment}


def build_roadmap_prompt(
    learning_goal: str,
    level: str = "beginner",
    time_commitment: str = "part-time",
) -> str:
    """Generate the roadmap prompt for a learning goal."""
    if level not in _LEVELS:
        _log.warning("prompt.unknown_option", option="level", value=level)
    if time_commitment not in _COMMITMENTS:
        _log.warning(
            "prompt.unknown_option", option="time_commitment", value=time_commitment
        )

    return f"""{ROADMAP_CREATOR_PROMPT}
Learning Goal: {learning_goal}
Current Level: {level}
Time Commitment: {time_commitment}

Please generate a comprehensive, well-structured learning roadmap:
"""

"""
Application-vision prompt and structured output model.

Maps a concept onto real-world use cases, a mini project, tools and industries.
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from edumorph.domain.value_objects import Persona
from edumorph.infra.config.logging_config import get_logger

_log = get_logger("prompts.application_vision")


# ---------- STRUCTURED OUTPUT MODELS ----------
class ApplicationVision(BaseModel):
    """Real-world applications of a single concept."""

    model_config = ConfigDict(populate_by_name=True)

    use_cases: List[str] = Field(..., alias="useCases")
    mini_project: str = Field(..., alias="miniProject")
    tools: List[str]
    industries: List[str]


# ---------- PROMPT TEMPLATES ----------
APPLICATION_VISION_PROMPT = """
You are an expert at identifying real-world applications of concepts across multiple domains.
When given a concept, generate:

1. Real-World Use Cases (1-2 applications):
   - Show practical uses in tech, science, business, creative fields
   - Be specific with examples
   - Format as array of strings
   - 4-5 sentences

2. Mini Project Idea:
   - A small, achievable project using the concept
   - Should be doable in a few hours to a day
   - Include specific technologies if relevant
   - 4-5 sentences

3. Tools & Skills:
   - List 3-5 actual software, APIs, frameworks used with this concept
   - Include both technical and non-technical tools
   - 4-5 sentences

4. Industry/Career Touchpoints:
   - 3-5 industries/job roles where this concept is important
   - Include both obvious and non-obvious applications

Persona Context (if provided):
- Engineer: focus on technical implementations
- Designer: focus on creative/visual applications
- Researcher: focus on academic/scientific uses
- Entrepreneur: focus on business/startup applications

Response Format (JSON):
{
  "useCases": string[],
  "miniProject": string,
  "tools": string[],
  "industries": string[]
}

Example Input: "Refraction"
Example Output:
{
  "useCases": [
    "Eyeglasses lens design to correct vision",
    "Camera lens optics for photography",
    "Underwater photography light correction"
  ],
  "miniProject": "Build a light refraction simulation using HTML Canvas API showing how light bends when passing through different media",
  "tools": ["Optics lab software", "Unity 3D for visual simulations", "Python with Matplotlib for modeling"],
  "industries": [
    "Optical engineering",
    "AR/VR development",
    "Photography equipment manufacturing",
    "Physics research"
  ]
}
"""

_PERSONAS = {p.value for p in Persona}


def build_application_vision_prompt(concept: str, persona: str = "default") -> str:
    """Generate the application-vision prompt for ``concept``."""
    if persona.lower() not in _PERSONAS:
        _log.warning("prompt.unknown_option", option="persona", value=persona)

    persona_line = f"Persona: {persona}" if persona != Persona.DEFAULT.value else ""

    return f"""{APPLICATION_VISION_PROMPT}
Concept: {concept}
{persona_line}

Generate comprehensive application vision:
"""

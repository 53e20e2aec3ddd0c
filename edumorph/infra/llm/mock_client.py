"""
Mock LLM client for local development and testing.

Recognises which template a prompt was built from and answers with a canned,
well-formed response. Streaming splits the same answer into word fragments.
"""

import json
import re
from typing import AsyncIterator, List

from edumorph.application.ports import LLMServicePort

VISION_RESPONSE = {
    "useCases": [
        "Eyeglasses lens design to correct vision",
        "Camera lens optics for photography",
        "Underwater photography light correction",
    ],
    "miniProject": "Build a light refraction simulation using HTML Canvas API showing how light bends when passing through different media",
    "tools": [
        "Optics lab software",
        "Unity 3D for visual simulations",
        "Python with Matplotlib for modeling",
    ],
    "industries": [
        "Optical engineering",
        "AR/VR development",
        "Photography equipment manufacturing",
        "Physics research",
    ],
}

_QUIZ_REQUEST = re.compile(r"Generate (\d+) quiz questions about (.+?) with (\w+) difficulty")
_ROADMAP_GOAL = re.compile(r"Learning Goal: (.*)")


class MockLLMClient(LLMServicePort):
    """Mock LLM client that returns fake responses."""

    def __init__(self) -> None:
        self.prompts: List[str] = []

    async def invoke_text(self, prompt: str) -> str:
        self.prompts.append(prompt)
        return self._respond(prompt)

    async def stream_text(self, prompt: str) -> AsyncIterator[str]:
        self.prompts.append(prompt)
        for fragment in re.findall(r"\S+\s*", self._respond(prompt)):
            yield fragment

    def _respond(self, prompt: str) -> str:
        if '"useCases"' in prompt:
            return "Here is the application vision:\n```json\n" + json.dumps(
                VISION_RESPONSE, indent=2
            ) + "\n```"

        if '"milestones"' in prompt:
            match = _ROADMAP_GOAL.search(prompt)
            goal = match.group(1).strip() if match else "your goal"
            return json.dumps(self._roadmap(goal))

        quiz = _QUIZ_REQUEST.search(prompt)
        if quiz:
            count, topic, difficulty = int(quiz.group(1)), quiz.group(2), quiz.group(3)
            return json.dumps(self._quiz(topic, difficulty.lower(), count))

        return (
            "## Explanation\n\n"
            "This is a **mock** answer generated without a model backend. "
            "Configure an API key to receive real explanations."
        )

    @staticmethod
    def _roadmap(goal: str) -> dict:
        milestones = [
            {
                "title": "Fundamentals & Setup",
                "description": f"Core vocabulary and tooling for {goal}",
                "estimatedDays": 14,
                "topics": ["Terminology", "Environment setup", "First steps"],
                "difficulty": "Beginner",
                "icon": "BookOpen",
            },
            {
                "title": "Core Concepts",
                "description": "The ideas everything else builds on",
                "estimatedDays": 21,
                "topics": ["Key principles", "Common patterns", "Practice drills"],
                "difficulty": "Intermediate",
                "icon": "Target",
            },
            {
                "title": "Capstone Project",
                "description": "Apply the skills end to end",
                "estimatedDays": 10,
                "topics": ["Planning", "Building", "Review"],
                "difficulty": "Advanced",
                "icon": "Trophy",
            },
        ]
        return {
            "title": f"Customized Learning Path for {goal}",
            "description": f"Comprehensive roadmap to master {goal} from fundamentals to advanced concepts",
            "totalDays": sum(m["estimatedDays"] for m in milestones),
            "totalMilestones": len(milestones),
            "category": "General",
            "milestones": milestones,
        }

    @staticmethod
    def _quiz(topic: str, difficulty: str, count: int) -> list:
        return [
            {
                "question": f"Sample question {i + 1} about {topic}?",
                "options": ["Option A", "Option B", "Option C", "Option D"],
                "correctAnswer": i % 4,
                "explanation": f"Option {'ABCD'[i % 4]} is the mock correct answer.",
                "difficulty": difficulty,
            }
            for i in range(count)
        ]

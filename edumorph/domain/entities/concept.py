"""
Concept-explanation session: the latest set of explanations a learner requested.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict


@dataclass
class ConceptSession:
    topic: str
    mode: str
    responses: Dict[str, str] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

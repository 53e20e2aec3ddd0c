"""
Learning roadmap progress tracking.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Optional

from edumorph.domain.exceptions import MilestoneNotFound


@dataclass
class MilestoneProgress:
    id: str
    title: str
    description: str
    estimated_days: int
    topics: List[str] = field(default_factory=list)
    difficulty: str = "Beginner"
    icon: str = "BookOpen"
    completed: bool = False


@dataclass
class RoadmapProgress:
    title: str
    description: str
    category: str
    total_days: int
    milestones: List[MilestoneProgress] = field(default_factory=list)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: Optional[datetime] = None

    @classmethod
    def from_roadmap(cls, roadmap) -> "RoadmapProgress":
        """Start tracking a freshly generated roadmap with nothing completed."""
        milestones = [
            MilestoneProgress(
                id=f"milestone-{index}",
                title=m.title,
                description=m.description,
                estimated_days=m.estimated_days,
                topics=list(m.topics),
                difficulty=m.difficulty,
                icon=m.icon,
            )
            for index, m in enumerate(roadmap.milestones, start=1)
        ]
        return cls(
            title=roadmap.title,
            description=roadmap.description,
            category=roadmap.category,
            total_days=roadmap.total_days,
            milestones=milestones,
        )

    @property
    def total_milestones(self) -> int:
        return len(self.milestones)

    @property
    def completed_count(self) -> int:
        return sum(1 for m in self.milestones if m.completed)

    @property
    def progress_percentage(self) -> float:
        if not self.milestones:
            return 0.0
        return self.completed_count / self.total_milestones * 100

    def toggle(self, milestone_id: str) -> MilestoneProgress:
        """Flip the completion flag of one milestone."""
        for milestone in self.milestones:
            if milestone.id == milestone_id:
                milestone.completed = not milestone.completed
                self.updated_at = datetime.now(timezone.utc)
                return milestone
        raise MilestoneNotFound(milestone_id)

from dataclasses import dataclass, field
from enum import Enum


class TaskStatus(str, Enum):
    OPEN = "open"
    CLAIMED = "claimed"
    COMPLETED = "completed"


class Priority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass
class Bounty:
    amount: float
    currency: str


@dataclass
class Task:
    id: str
    title: str
    creator: str
    created_at: int
    updated_at: int
    description: str | None = None
    status: TaskStatus = TaskStatus.OPEN
    priority: Priority = Priority.MEDIUM
    assignee: str | None = None
    tags: list[str] = field(default_factory=list)
    bounty: Bounty | None = None
    proof: str | None = None
    completed_at: int | None = None

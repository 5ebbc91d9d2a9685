from datetime import datetime, timezone

from forge.core.models import Bounty, Task, TaskStatus
from forge.task.view import to_public


def test_to_public_converts_timestamps():
    task = Task(
        id="a1",
        title="T",
        creator="@user",
        created_at=0,
        updated_at=1_500,
        status=TaskStatus.COMPLETED,
        bounty=Bounty(1.5, "TEST"),
        completed_at=1_500,
    )

    pub = to_public(task)

    assert pub["created_at"] == datetime(1970, 1, 1, tzinfo=timezone.utc)
    assert pub["updated_at"] == datetime(1970, 1, 1, 0, 0, 1, 500_000, tzinfo=timezone.utc)
    assert pub["completed_at"] == pub["updated_at"]
    assert pub["bounty"] == Bounty(1.5, "TEST")
    assert pub["status"] is TaskStatus.COMPLETED
    assert task.created_at == 0


def test_to_public_keeps_missing_completion():
    task = Task(id="a1", title="T", creator="@user", created_at=10, updated_at=10)

    assert to_public(task)["completed_at"] is None

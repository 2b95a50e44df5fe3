"""Shared pytest fixtures for task board tests."""

from pathlib import Path

import pytest

from taskboard_tui.config import load_config
from taskboard_tui.models import Board, Sprint, Task
from taskboard_tui.search import Candidate


@pytest.fixture(scope="session")
def test_config():
    """Load test configuration from tests/test_config.toml."""
    config_path = Path(__file__).parent / "test_config.toml"
    return load_config(config_path)


@pytest.fixture
def sample_sprints():
    """Create sample sprints."""
    return (
        Sprint(id=1, name="Sprint 1", goal="Ship login", status="active"),
        Sprint(id=2, name="Sprint 2", status="planned"),
    )


@pytest.fixture
def sample_tasks():
    """Create sample tasks: one backlog, three in sprints, one orphaned."""
    return (
        Task(id=1, title="Fix login bug", priority="high"),
        Task(id=2, title="Add login page", sprint_id=1, priority="medium"),
        Task(id=3, title="Deploy service", sprint_id=1, priority="low", status="done"),
        Task(id=4, title="Write release notes", sprint_id=2, priority="low"),
        Task(id=5, title="Update docs", sprint_id=99, priority="medium"),
    )


@pytest.fixture
def sample_board(sample_tasks, sample_sprints):
    """Board built from the sample tasks and sprints."""
    return Board(tasks=sample_tasks, sprints=sample_sprints)


@pytest.fixture
def login_candidates():
    """The two-task snapshot used in the session walkthrough."""
    return (
        Candidate(id=1, searchable_text="Fix login bug", location_label="Backlog"),
        Candidate(id=2, searchable_text="Add login page", location_label="Sprint 1"),
    )


@pytest.fixture
def make_candidates():
    """Factory: candidates with ids 1..n for the given titles."""

    def _make(*titles: str) -> tuple[Candidate, ...]:
        return tuple(
            Candidate(id=i, searchable_text=title, location_label="Backlog")
            for i, title in enumerate(titles, start=1)
        )

    return _make


TASK_FILES = {
    "001-fix-login-bug.md": """---
id: 1
title: "Fix login bug"
status: "todo"
sprint: null
priority: "high"
storyPoints: 3
createdAt: "2024-01-05T10:00:00.000Z"
updatedAt: "2024-01-05T10:00:00.000Z"
---
Users get logged out after refresh.
""",
    "002-add-login-page.md": """---
id: 2
title: "Add login page"
status: "in-progress"
sprint: 1
priority: "medium"
storyPoints: 5
---
""",
    "010-deploy-service.md": """---
id: 10
title: "Deploy service"
status: "done"
sprint: 1
priority: "low"
---
""",
    "003-write-release-notes.md": """---
id: 3
title: "Write release notes"
status: "todo"
sprint: 7
priority: "low"
---
""",
}

SPRINT_FILES = {
    "sprint-1.md": """---
id: 1
name: "Sprint 1"
goal: "Ship login"
startDate: "2024-01-01"
endDate: "2024-01-14"
status: "active"
---
""",
}


def write_board(root: Path, tasks: dict[str, str], sprints: dict[str, str]) -> Path:
    """Write task and sprint markdown files under root."""
    (root / "tasks").mkdir(parents=True, exist_ok=True)
    (root / "sprints").mkdir(parents=True, exist_ok=True)
    for name, content in tasks.items():
        (root / "tasks" / name).write_text(content, encoding="utf-8")
    for name, content in sprints.items():
        (root / "sprints" / name).write_text(content, encoding="utf-8")
    return root


@pytest.fixture
def board_dir(tmp_path):
    """Board directory with four tasks and one sprint on disk."""
    return write_board(tmp_path / "board", TASK_FILES, SPRINT_FILES)

"""Tests for the task board TUI app."""

from textual.widgets import ListView

from taskboard_tui.models import Board, Task
from taskboard_tui.services import load_board
from taskboard_tui.tui.app import TaskBoardApp, TaskListItem
from taskboard_tui.tui.modals import TaskSearchModal
from taskboard_tui.tui.screens import HelpScreen, TaskDetailScreen, format_task_details


class TestTaskBoardApp:
    """Tests for the main TUI app."""

    async def test_lists_tasks(self, sample_board):
        app = TaskBoardApp(board=sample_board)

        async with app.run_test() as pilot:
            await pilot.pause()
            items = list(app.query(TaskListItem))
            assert [item.board_task.id for item in items] == [1, 2, 3, 4, 5]

    async def test_slash_opens_search(self, sample_board):
        app = TaskBoardApp(board=sample_board)

        async with app.run_test() as pilot:
            await pilot.pause()
            await pilot.press("/")
            await pilot.pause()
            assert any(isinstance(s, TaskSearchModal) for s in app.screen_stack)

    async def test_ctrl_k_opens_search(self, sample_board):
        app = TaskBoardApp(board=sample_board)

        async with app.run_test() as pilot:
            await pilot.pause()
            await pilot.press("ctrl+k")
            await pilot.pause()
            assert isinstance(app.screen, TaskSearchModal)

    async def test_escape_closes_search(self, sample_board):
        app = TaskBoardApp(board=sample_board)

        async with app.run_test() as pilot:
            await pilot.pause()
            await pilot.press("/")
            await pilot.pause()
            await pilot.press("escape")
            await pilot.pause()
            assert not any(isinstance(s, TaskSearchModal) for s in app.screen_stack)

    async def test_commit_moves_cursor_to_task(self, sample_board):
        app = TaskBoardApp(board=sample_board)

        async with app.run_test() as pilot:
            await pilot.pause()
            await pilot.press("/")
            await pilot.pause()
            for char in "deploy":
                await pilot.press(char)
            await app.workers.wait_for_complete()
            await pilot.pause()
            await pilot.press("enter")
            await pilot.pause()

            assert not isinstance(app.screen, TaskSearchModal)
            assert isinstance(app.screen, TaskDetailScreen)
            await pilot.press("escape")
            await pilot.pause()
            assert app.query_one("#tasks-list", ListView).index == 2

    async def test_search_on_empty_board(self):
        app = TaskBoardApp(board=Board())

        async with app.run_test() as pilot:
            await pilot.pause()
            await pilot.press("/")
            await pilot.pause()
            assert not any(isinstance(s, TaskSearchModal) for s in app.screen_stack)

    async def test_help_screen(self, sample_board):
        app = TaskBoardApp(board=sample_board)

        async with app.run_test() as pilot:
            await pilot.pause()
            await pilot.press("?")
            await pilot.pause()
            assert isinstance(app.screen, HelpScreen)
            await pilot.press("escape")
            await pilot.pause()
            assert not isinstance(app.screen, HelpScreen)

    async def test_refresh_reloads_board(self, board_dir):
        app = TaskBoardApp(board=load_board(board_dir), board_path=board_dir)

        async with app.run_test() as pilot:
            await pilot.pause()
            (board_dir / "tasks" / "011-new.md").write_text("---\nid: 11\ntitle: New task\n---\n")
            await pilot.press("f5")
            await pilot.pause()
            assert [t.id for t in app.board.tasks] == [1, 2, 3, 10, 11]
            assert len(list(app.query(TaskListItem))) == 5

    async def test_refresh_without_path_does_not_crash(self, sample_board):
        app = TaskBoardApp(board=sample_board)

        async with app.run_test() as pilot:
            await pilot.pause()
            await pilot.press("f5")
            await pilot.pause()
            assert app.is_running

    async def test_commit_opens_task_details(self, board_dir):
        board = load_board(board_dir)
        app = TaskBoardApp(board=board, board_path=board_dir)

        async with app.run_test() as pilot:
            await pilot.pause()
            await pilot.press("/")
            await pilot.pause()
            for char in "fix":
                await pilot.press(char)
            await app.workers.wait_for_complete()
            await pilot.pause()
            await pilot.press("enter")
            await pilot.pause()

            screen = app.screen
            assert isinstance(screen, TaskDetailScreen)
            assert screen.board_task.id == 1
            assert "Users get logged out after refresh." in screen.details
            assert "Backlog" in screen.details

            await pilot.press("escape")
            await pilot.pause()
            assert not isinstance(app.screen, TaskDetailScreen)
            assert app.query_one("#tasks-list", ListView).index == 0

    async def test_cancelled_search_opens_nothing(self, sample_board):
        app = TaskBoardApp(board=sample_board)

        async with app.run_test() as pilot:
            await pilot.pause()
            await pilot.press("/")
            await pilot.pause()
            await pilot.press("escape")
            await pilot.pause()
            assert not isinstance(app.screen, TaskDetailScreen)


class TestFormatTaskDetails:
    def test_sprint_fields(self, board_dir):
        board = load_board(board_dir)
        text = format_task_details(board.get_task(2), board)
        assert "in-progress" in text
        assert "Sprint 1" in text
        assert "2024-01-01 → 2024-01-14" in text
        assert "Ship login" in text
        assert "5" in text
        assert "No description" in text

    def test_backlog_task_with_body(self, board_dir):
        board = load_board(board_dir)
        text = format_task_details(board.get_task(1), board)
        assert "Backlog" in text
        assert "high" in text
        assert "2024-01-05T10:00:00.000Z" in text
        assert text.endswith("Users get logged out after refresh.")

    def test_markup_in_body_escaped(self):
        task = Task(id=9, title="x", body="[red]not markup[/red]")
        text = format_task_details(task, Board(tasks=(task,)))
        assert "\\[red]not markup" in text

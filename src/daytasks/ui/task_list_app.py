"""Textual task screen.

One screen: today's date, a Sun..Sat day picker, the tasks due on the picked
day (or a congratulation message when there are none), an input to add a
task and a button that drops an event into the calendar.
"""

from rich.text import Text
from textual import on
from textual.app import App, ComposeResult
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import (
    Button,
    Footer,
    Header,
    Input,
    Label,
    ListItem,
    ListView,
    Static,
    Tab,
    Tabs,
)

from daytasks.adapters.ics import IcsCalendarBackend
from daytasks.models import Task
from daytasks.services.calendar_service import ACCESS_QUESTION, CalendarService
from daytasks.services.config_service import ConfigService, get_config_service
from daytasks.services.day_filter import DAY_LABELS, day_index_of
from daytasks.services.task_store import TaskStore
from daytasks.utils.clock import Clock, SystemClock
from daytasks.utils.ui.formatters import STATUS_ICONS, format_long_date

EMPTY_TITLE = "Congratulations, all your tasks are complete!"
EMPTY_SUBTITLE = "Enjoy your screen time!"


class CalendarAccessScreen(ModalScreen[bool]):
    """Yes/no dialog asking for calendar access."""

    CSS = """
    CalendarAccessScreen {
        align: center middle;
    }

    #access-dialog {
        width: 60;
        height: auto;
        padding: 1 2;
        border: thick $primary;
        background: $surface;
    }

    #access-buttons {
        height: auto;
        margin-top: 1;
    }
    """

    def compose(self) -> ComposeResult:
        with Vertical(id="access-dialog"):
            yield Label(ACCESS_QUESTION, id="access-question")
            with Horizontal(id="access-buttons"):
                yield Button("Allow", variant="primary", id="allow")
                yield Button("Don't Allow", id="deny")

    @on(Button.Pressed, "#allow")
    def handle_allow(self) -> None:
        self.dismiss(True)

    @on(Button.Pressed, "#deny")
    def handle_deny(self) -> None:
        self.dismiss(False)


class DeleteButton(Button):
    """Check box in front of a task; pressing it deletes the task."""

    def __init__(self, task_id: str, completed: bool = False):
        icon = STATUS_ICONS["completed" if completed else "open"]
        super().__init__(icon, classes="delete-task")
        self.task_id = task_id


class TaskRow(ListItem):
    """A task with its delete box. Completed names are struck through."""

    def __init__(self, task: Task):
        name = Text(task.name, style="strike" if task.completed else "")
        super().__init__(
            Horizontal(
                DeleteButton(task.id, task.completed),
                Label(name, classes="task-name"),
                classes="task-row",
            )
        )
        self.todo = task


class TaskListApp(App):
    """Single-screen weekday task list."""

    TITLE = "To-Do List"

    CSS = """
    #current-date {
        width: 100%;
        content-align: center middle;
        text-style: bold;
        padding: 1 0;
    }

    #task-list {
        height: 1fr;
        margin: 1 2;
    }

    .task-row {
        height: 3;
    }

    .delete-task {
        min-width: 6;
        width: 6;
    }

    .task-name {
        padding: 1 1;
    }

    #empty-state {
        height: 1fr;
        align: center middle;
    }

    #empty-state Static {
        width: 100%;
        content-align: center middle;
        color: $accent;
    }

    #empty-title {
        text-style: bold;
    }

    #task-input {
        margin: 0 2;
    }

    #add-event {
        margin: 1 2;
    }
    """

    def __init__(
        self,
        store: TaskStore | None = None,
        calendar: CalendarService | None = None,
        clock: Clock | None = None,
        config_service: ConfigService | None = None,
    ):
        super().__init__()
        self.config_service = config_service or get_config_service()
        self.clock = clock or SystemClock()
        self.store = store or TaskStore(clock=self.clock)
        self.calendar = calendar or CalendarService(
            IcsCalendarBackend(self.config_service.calendar_path),
            self.config_service,
            self.clock,
        )

        ui_config = self.config_service.config.ui
        if ui_config.start_on_today:
            self.selected_day_index = day_index_of(self.clock.now())
        else:
            self.selected_day_index = ui_config.default_day_index

    def compose(self) -> ComposeResult:
        """Compose the app layout."""
        date_style = self.config_service.config.ui.date_format

        yield Header()
        yield Static(
            format_long_date(self.clock.now(), date_style), id="current-date"
        )
        yield Tabs(
            *[Tab(label, id=f"day-{index}") for index, label in enumerate(DAY_LABELS)],
            active=f"day-{self.selected_day_index}",
            id="day-picker",
        )
        yield ListView(id="task-list")
        with Vertical(id="empty-state"):
            yield Static(EMPTY_TITLE, id="empty-title")
            yield Static(EMPTY_SUBTITLE, id="empty-subtitle")
        yield Input(placeholder="Add a new task", id="task-input")
        yield Button("Add Event to Calendar", id="add-event")
        yield Footer()

    async def on_mount(self) -> None:
        """Render the selected day and ask for calendar access once."""
        await self.refresh_tasks()
        self.query_one("#task-input", Input).focus()
        self.run_worker(
            self._request_calendar_access(), group="calendar", exit_on_error=False
        )

    async def _request_calendar_access(self) -> None:
        await self.calendar.request_access(self._ask_calendar_access)

    async def _ask_calendar_access(self) -> bool:
        return bool(await self.push_screen_wait(CalendarAccessScreen()))

    def visible_tasks(self) -> list[Task]:
        """Tasks due on the selected day, in the order they were added."""
        return self.store.filtered_tasks(self.selected_day_index)

    async def refresh_tasks(self) -> None:
        """Rebuild the list (or the empty state) for the selected day."""
        tasks = self.visible_tasks()
        task_list = self.query_one("#task-list", ListView)

        await task_list.clear()
        await task_list.extend(TaskRow(task) for task in tasks if not task.completed)

        task_list.display = bool(tasks)
        self.query_one("#empty-state").display = not tasks

    @on(Tabs.TabActivated, "#day-picker")
    async def handle_day_change(self, event: Tabs.TabActivated) -> None:
        """Switch the selected day."""
        if event.tab.id is None:
            return
        self.selected_day_index = int(event.tab.id.removeprefix("day-"))
        await self.refresh_tasks()

    @on(Input.Submitted, "#task-input")
    async def handle_submit(self, event: Input.Submitted) -> None:
        """Add the typed task to the selected day."""
        task = self.store.add_task(event.value, self.selected_day_index)
        if task is not None:
            event.input.value = ""
            await self.refresh_tasks()

    @on(Button.Pressed, ".delete-task")
    async def handle_delete(self, event: Button.Pressed) -> None:
        """Delete the task whose box was pressed."""
        if isinstance(event.button, DeleteButton):
            self.store.delete_task(event.button.task_id)
            await self.refresh_tasks()

    @on(Button.Pressed, "#add-event")
    def handle_add_event(self) -> None:
        """Fire-and-forget calendar insert; the outcome is only logged."""
        self.calendar.add_event_in_background()

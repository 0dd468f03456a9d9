"""Task domain model."""

from pydantic import BaseModel

CHECKBOX_DONE = "[X]"
CHECKBOX_TODO = "[ ]"


class Task(BaseModel):
    """A titled, content-bearing, completable to-do item."""

    title: str  # Unique key across every backend
    content: str = ""
    completed: bool = False

    # Remote-only fields
    task_id: str | None = None  # Google Tasks item id
    due: str | None = None  # RFC 3339 string, kept opaque

    @property
    def checkbox(self) -> str:
        """Checkbox prefix for display."""
        return CHECKBOX_DONE if self.completed else CHECKBOX_TODO

    def summary(self) -> str:
        """Render a single display line for the task."""
        line = f"{self.checkbox} {self.title}: {self.content}"
        if self.due:
            line += f" (due: {self.due})"
        return line

"""Task domain model - no I/O dependencies."""

from dataclasses import dataclass, field

NEEDS_ACTION = "needsAction"
COMPLETED = "completed"
STATUSES = (NEEDS_ACTION, COMPLETED)


@dataclass
class Task:
    """A remote to-do item.

    ``raw`` keeps the full API payload so remote metadata (etag, updated,
    position, ...) round-trips to callers untouched.
    """

    id: str
    title: str
    status: str = NEEDS_ACTION
    notes: str | None = None
    raw: dict = field(default_factory=dict, repr=False)

    @property
    def is_completed(self) -> bool:
        return self.status == COMPLETED

    @classmethod
    def from_api(cls, data: dict) -> "Task":
        """Create Task from a Google Tasks API resource."""
        return cls(
            id=data["id"],
            title=data.get("title", ""),
            status=data.get("status", NEEDS_ACTION),
            notes=data.get("notes"),
            raw=dict(data),
        )

    def to_dict(self) -> dict:
        """Serialize back to the API shape, remote fields included."""
        data = dict(self.raw)
        data.update({"id": self.id, "title": self.title, "status": self.status})
        if self.notes is not None:
            data["notes"] = self.notes
        else:
            data.pop("notes", None)
        return data

from todolist.models.priority import Priority
from todolist.models.status import Status
from todolist.models.tag import Tag, todo_tags
from todolist.models.todo import Todo

__all__ = [
    "Priority",
    "Status",
    "Tag",
    "Todo",
    "todo_tags",
]

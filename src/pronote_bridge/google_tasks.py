from __future__ import annotations

import json
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Final

from google.auth.transport.requests import AuthorizedSession
from google.oauth2 import service_account
from logprise import logger

from .config import DEFAULT_GOOGLE_CREDENTIALS
from .exceptions import GoogleTasksError
from .objects import Task, TaskList

if TYPE_CHECKING:
    from datetime import datetime

    from requests import Session

__all__ = ["GoogleTasks", "recommended_task_list"]

API_URL: Final[str] = "https://tasks.googleapis.com/tasks/v1"
SCOPES: Final[list[str]] = ["https://www.googleapis.com/auth/tasks"]
DEFAULT_LIST_TITLE: Final[str] = "@default"


def recommended_task_list(task_lists: list[TaskList]) -> TaskList | None:
    """The list called `@default`, or else the first one."""
    for task_list in task_lists:
        if task_list.title == DEFAULT_LIST_TITLE:
            return task_list

    return task_lists[0] if task_lists else None


@dataclass
class GoogleTasks:
    """
    Talks to the Google Tasks API as a service account.

    Example:
    -------
    >>> tasks = GoogleTasks("google-credentials.json")
    >>> for task_list in tasks.task_lists():
    >>>     print(task_list.title, task_list.id)
    @default MTIzNDU2Nzg5

    """

    credentials_file: str | Path = DEFAULT_GOOGLE_CREDENTIALS
    session: Session | None = field(default=None, repr=False)

    def __post_init__(self):
        if self.session is None:
            self.session = self._authorized_session()

    def _authorized_session(self) -> AuthorizedSession:
        path = Path(self.credentials_file)
        if not path.is_file():
            raise FileNotFoundError(f"Service account key file not found: {path}")

        logger.debug(f"Loading service account from {path}")
        credentials = service_account.Credentials.from_service_account_file(str(path), scopes=SCOPES)
        return AuthorizedSession(credentials)

    def json(self, url: str, method: str = "get", **kwargs) -> dict:
        r = self.session.request(method.upper(), API_URL + url, **kwargs)

        if not 200 <= r.status_code < 300:
            raise GoogleTasksError(f"Google Tasks answered {r.status_code} for {method.upper()} {url}", r)

        if not r.text:
            return {}

        try:
            return r.json()
        except json.JSONDecodeError:
            raise GoogleTasksError("Failed to decode the json", r) from None

    def _paginate(self, url: str, params: dict | None = None) -> Iterator[dict]:
        params = dict(params or {})
        while True:
            data = self.json(url, params=params)
            yield from data.get("items", [])

            page_token = data.get("nextPageToken")
            if not page_token:
                break
            params["pageToken"] = page_token

    def task_lists(self) -> list[TaskList]:
        return [TaskList(**item) for item in self._paginate("/users/@me/lists")]

    def tasks(self, task_list_id: str, *, show_completed: bool = True) -> list[Task]:
        params = {"showCompleted": str(show_completed).lower(), "showHidden": str(show_completed).lower()}
        return [Task(**item) for item in self._paginate(f"/lists/{task_list_id}/tasks", params)]

    def insert_task(self, task_list_id: str, title: str, notes: str = "", due: datetime | None = None) -> Task:
        body = {"title": title, "notes": notes}
        if due is not None:
            # The API only keeps the date part.
            body["due"] = f"{due:%Y-%m-%d}T00:00:00.000Z"

        logger.info(f"Creating task {title!r} in {task_list_id}")
        return Task(**self.json(f"/lists/{task_list_id}/tasks", method="post", json=body))

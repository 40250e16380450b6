#!/usr/bin/env python
from __future__ import annotations

import argparse
import sys
import time
from dataclasses import dataclass, field
from functools import cached_property
from pathlib import Path

from google.auth.exceptions import GoogleAuthError
from logprise import logger
from requests import RequestException

from .bridge import PronoteBridge
from .config import PathConfig
from .exceptions import GoogleTasksError, PronoteAuthenticationError, PronoteBridgeException, PronoteConfigError
from .google_tasks import GoogleTasks
from .objects import Homework
from .sync import sync_homeworks

__all__ = ["BridgeApp", "main"]

# A failed push is retried on the next refresh.
SYNC_ERRORS = (GoogleTasksError, GoogleAuthError, RequestException, FileNotFoundError, ValueError)


@dataclass
class BridgeApp:
    """Refreshes every account of the configuration, and pushes new homework to Google Tasks when configured."""

    config: PathConfig
    bridge: PronoteBridge = field(init=False)

    def __post_init__(self):
        self.bridge = PronoteBridge(self.config)

    @cached_property
    def _tasks(self) -> GoogleTasks | None:
        if not self.config.task_list_id:
            return None
        return GoogleTasks(self.config.google_credentials)

    def refresh(self) -> None:
        for account in self.config.accounts:
            try:
                data = self.bridge.student_data(account)
            except PronoteAuthenticationError as e:
                logger.error(f"Skipping {account.username}: {e}")
                continue

            logger.info(
                f"{account.username}: {len(data.grades)} grade(s), {len(data.timetable)} lesson(s), "
                f"{len(data.homeworks)} homework(s), average {data.averages.value} (class: {data.averages.everyone})"
            )

            if data.homeworks:
                self._push(account.username, data.homeworks)

    def _push(self, username: str, homeworks: list[Homework]) -> None:
        try:
            if self._tasks is not None:
                sync_homeworks(homeworks, self._tasks, self.config.task_list_id)
        except SYNC_ERRORS as e:
            logger.error(f"Pushing the homework of {username} to Google Tasks failed: {e}")

    def run(self, *, once: bool = False) -> None:
        while True:
            self.refresh()
            if once:
                return

            logger.debug(f"Sleeping {self.config.refresh_every} seconds")
            time.sleep(self.config.refresh_every)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Fetch grades, timetable, homework and averages from Pronote")
    parser.add_argument("--config", default="", type=str, help=f"Configuration file (default: searches for {PathConfig.CONFIG_FILENAME})")
    parser.add_argument("--once", action="store_true", help="Refresh once and exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug messages")

    args = parser.parse_args(argv)

    if args.verbose:
        logger.remove()
        logger.add(sys.stderr, level="DEBUG")

    try:
        BridgeApp(PathConfig(Path(args.config) if args.config else "")).run(once=args.once)
    except FileNotFoundError as e:
        logger.error(f"Initialization failed: {e}")
        logger.error(f"Ensure {PathConfig.CONFIG_FILENAME} exists and is configured correctly")
        return 1
    except PronoteConfigError as e:
        logger.error(f"Initialization failed: {e.message}")
        return 1
    except PronoteBridgeException:
        logger.exception("A pronote-bridge error occurred")
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted by user")

    return 0


if __name__ == "__main__":
    sys.exit(main())

#!/usr/bin/env python
"""Helper to find the Google Tasks list id to put in the configuration."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from google.auth.exceptions import GoogleAuthError
from logprise import logger
from requests import RequestException

from .config import DEFAULT_GOOGLE_CREDENTIALS
from .exceptions import GoogleTasksError
from .google_tasks import GoogleTasks, recommended_task_list

__all__ = ["get_task_list_id", "main"]


def get_task_list_id(credentials_file: str | Path = DEFAULT_GOOGLE_CREDENTIALS) -> str | None:
    try:
        task_lists = GoogleTasks(credentials_file).task_lists()
    except (FileNotFoundError, ValueError, GoogleAuthError, GoogleTasksError, RequestException) as e:
        logger.error(f"Error getting task lists: {e}")
        logger.info("Make sure:")
        logger.info(f"1. {Path(credentials_file).name} exists in this directory")
        logger.info("2. Google Tasks API is enabled")
        logger.info("3. Service account has proper permissions")
        return None

    logger.info("Available Task Lists:")
    for index, task_list in enumerate(task_lists, start=1):
        logger.info(f"{index}. {task_list.title} (ID: {task_list.id})")

    recommended = recommended_task_list(task_lists)
    if recommended is None:
        logger.warning("This service account doesn't have any task list")
        return None

    logger.info("")
    logger.info(f"Recommended Task List ID: {recommended.id}")
    logger.info("Copy this ID to the task_list_id field of your config.yml")

    return recommended.id


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="List the Google Tasks lists of a service account")
    parser.add_argument(
        "--credentials",
        default=DEFAULT_GOOGLE_CREDENTIALS,
        type=Path,
        help=f"Service account key file (default: {DEFAULT_GOOGLE_CREDENTIALS})",
    )

    args = parser.parse_args(argv)

    return 0 if get_task_list_id(args.credentials) else 1


if __name__ == "__main__":
    sys.exit(main())

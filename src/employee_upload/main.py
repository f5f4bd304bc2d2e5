"""
Employee Upload Client.

Entry point that saves one employee record and uploads its document.
"""

import argparse
import sys

import requests
from ddtrace import patch_all

from employee_upload.dependencies import get_handler
from employee_upload.domain import FileReference, FormSnapshot
from employee_upload.exceptions import MissingFileError
from employee_upload.logging import setup_logging

logger = setup_logging()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="employee-upload",
        description="Save an employee record and upload its document.",
    )
    parser.add_argument("--name", required=True, help="Employee name")
    parser.add_argument("--hire-date", required=True, help="Hire date")
    parser.add_argument("--salary", required=True, help="Salary")
    parser.add_argument("--app-id", required=True, help="APEX application id")
    parser.add_argument("--session-id", required=True, help="APEX session id")
    parser.add_argument("--page-id", default=None, help="APEX page id")
    parser.add_argument("--file", default=None, help="Document to upload")
    return parser


def select_file(path: str | None) -> FileReference | None:
    """Returns the file selection, or None when nothing usable was given."""
    if not path:
        return None
    try:
        return FileReference.from_path(path)
    except MissingFileError:
        logger.warning("Selected file not found", extra={"file_path": path})
        return None


def main(argv: list[str] | None = None) -> int:
    """Runs a single save-and-upload flow and returns the exit code."""
    patch_all()

    args = build_parser().parse_args(argv)
    form = FormSnapshot(
        employee_name=args.name,
        hire_date=args.hire_date,
        salary=args.salary,
        application_id=args.app_id,
        session_id=args.session_id,
        page_id=args.page_id,
    )

    with requests.Session() as session:
        result = get_handler(session).run(form, select_file(args.file))

    return 0 if result.succeeded else 1


if __name__ == "__main__":
    sys.exit(main())

"""Main module for the togglsum package."""
import os
import sys
import argparse
from typing import Callable, Optional, List
from dotenv import load_dotenv

from . import __version__
from .api.client import TogglClient
from .errors import TogglSumError, SelectionCancelled, SelectionError
from .reports.summary import fold_entries, format_summary, selection_table
from .reports.time_entry import TimeEntry
from .ui.selector import RangeSelector
from .utils.date_utils import fetch_window, iso_date
from .utils.file_utils import CredentialStore

ENV_FILE = "togglsum.env"
QUESTION = "Which times should be sum up?"
CANCELLED_MESSAGE = "Selection cancelled, nothing summed up."


# --- Environment Setup ---
def load_environment(env_file: Optional[str] = None):
    """Load environment variables from the togglsum.env file, if there is one."""
    env_file = env_file or ENV_FILE
    if os.path.exists(env_file):
        load_dotenv(env_file)


# --- CLI Logic ---
def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments.

    Args:
        argv: Arguments to parse (defaults to sys.argv)

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(
        description="Select Toggl time entries of the last 89 days and sum them up.",
        epilog="""
The API key is read from ./api_key.json (or TOGGL_CREDENTIALS_FILE, or TOGGL_API_KEY).
If there is none, you are asked for it once and it is stored.
""",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        prog="togglsum"
    )
    parser.add_argument('--version', action='version', version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def summarize_selection(entries: List[TimeEntry]) -> str:
    """Render the summary line for a list of entries."""
    return format_summary(fold_entries(entries))


def run(store: CredentialStore, client_factory: Optional[Callable[[str], TogglClient]] = None,
        prompt: Optional[Callable[[str], str]] = None) -> str:
    """Fetch, select and sum up time entries.

    Args:
        store: Where the API key comes from
        client_factory: Builds the API client from the API key (defaults to TogglClient)
        prompt: Function used to ask for the API key (defaults to input)

    Returns:
        Summary line for the selected entries

    Raises:
        TogglSumError: If any step of the pipeline fails or is cancelled
    """
    prompt = prompt or input
    api_key = store.load_or_ask(prompt).unwrap()
    client = (client_factory or TogglClient)(api_key)

    start_date, end_date = fetch_window()
    print(f"Showing entries from {iso_date(start_date)} to {iso_date(end_date)} ", end="", flush=True)
    entries = client.get_time_entries(start_date, end_date)
    print(f"({len(entries)})")

    selector = RangeSelector(QUESTION, entries, summarize=summarize_selection)
    selected = selector.run()

    if selected:
        print(selection_table(selected))
    summary = fold_entries(selected)
    if summary.skipped_running:
        print(f"[INFO] {summary.skipped_running} running entries counted as 00:00:00.")
    return format_summary(summary)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point.

    Returns:
        Process exit code
    """
    parse_args(argv)
    load_environment()
    store = CredentialStore(env_key=os.getenv("TOGGL_API_KEY"))

    try:
        print(run(store))
    except SelectionCancelled:
        print(CANCELLED_MESSAGE)
    except SelectionError as e:
        print(f"Selection failed: {e}")
    except TogglSumError as e:
        print(f"\n[ERROR] {e}")
        return e.exit_code
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""
togglsum: A CLI tool for summing up selected Toggl Track time entries.

- Fetches the time entries of the last 89 days from the Toggl Track API
- Lets you pick the entries to sum up in a paginated terminal list
- Prints the total time and what it is worth at a fixed hourly rate
- Can be used as a CLI (via `python -m togglsum` or `togglsum` if installed as a package)
"""

__version__ = "0.1.0"

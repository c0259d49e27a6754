"""File I/O utility functions for togglsum."""
import os
import json
from enum import Enum
from typing import Callable, Optional

from ..errors import CredentialError

DEFAULT_CREDENTIALS_FILE = "./api_key.json"
API_KEY_PROMPT = "Please enter your api key: "


class CredentialStatus(Enum):
    FOUND = "found"
    CREATED = "created"
    FAILED = "failed"


class CredentialResult:
    """Outcome of looking up the API key."""

    def __init__(self, status: CredentialStatus, api_key: Optional[str] = None,
                 source: str = "", message: str = ""):
        self.status = status
        self.api_key = api_key
        self.source = source
        self.message = message

    @property
    def ok(self) -> bool:
        return self.status is not CredentialStatus.FAILED

    def unwrap(self) -> str:
        """Get the API key.

        Returns:
            The API key

        Raises:
            CredentialError: If the lookup failed
        """
        if not self.ok:
            raise CredentialError(self.message)
        return self.api_key

    def __repr__(self) -> str:
        return f"CredentialResult({self.status.value}, source={self.source!r})"


def read_json(path: str) -> dict:
    """Read a JSON object from a file.

    Args:
        path: File path

    Returns:
        Parsed JSON object
    """
    with open(path, 'r', encoding='utf-8') as f:
        return json.load(f)


def write_json(path: str, data: dict):
    """Write a JSON object to a file, creating parent directories.

    Args:
        path: File path
        data: Object to serialize
    """
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(data, f)


class CredentialStore:
    """Stores the Toggl API key in a small JSON file."""

    def __init__(self, path: Optional[str] = None, env_key: Optional[str] = None):
        """Initialize the CredentialStore.

        Args:
            path: Credential file path (defaults to TOGGL_CREDENTIALS_FILE or ./api_key.json)
            env_key: API key taken from the environment, used instead of the file
        """
        self.path = path or os.getenv("TOGGL_CREDENTIALS_FILE") or DEFAULT_CREDENTIALS_FILE
        self.env_key = env_key

    def load(self) -> CredentialResult:
        """Read the API key from the credential file.

        Returns:
            FOUND with the key, or FAILED if the file is missing or invalid
        """
        if self.env_key:
            return CredentialResult(CredentialStatus.FOUND, self.env_key, source="environment")
        try:
            data = read_json(self.path)
        except FileNotFoundError:
            return CredentialResult(CredentialStatus.FAILED, source=self.path,
                                    message=f"Credential file '{self.path}' does not exist")
        except (OSError, ValueError) as e:
            return CredentialResult(CredentialStatus.FAILED, source=self.path,
                                    message=f"Could not read '{self.path}': {e}")

        api_key = data.get("api_key") if isinstance(data, dict) else None
        if not isinstance(api_key, str) or not api_key.strip():
            return CredentialResult(CredentialStatus.FAILED, source=self.path,
                                    message=f"'{self.path}' has no api_key entry")
        return CredentialResult(CredentialStatus.FOUND, api_key.strip(), source=self.path)

    def store(self, api_key: str) -> CredentialResult:
        """Write the API key to the credential file.

        Args:
            api_key: API key to store

        Returns:
            CREATED with the key, or FAILED if the file could not be written
        """
        try:
            write_json(self.path, {"api_key": api_key})
        except OSError as e:
            return CredentialResult(CredentialStatus.FAILED, source=self.path,
                                    message=f"Could not write '{self.path}': {e}")
        print(f"[INFO] API key stored in '{self.path}'.")
        return CredentialResult(CredentialStatus.CREATED, api_key, source=self.path)

    def load_or_ask(self, prompt: Callable[[str], str] = input) -> CredentialResult:
        """Read the API key, asking for it and storing it if there is no credential file.

        Args:
            prompt: Function used to ask the user (defaults to input)

        Returns:
            Result of the lookup
        """
        if self.env_key or os.path.exists(self.path):
            return self.load()

        try:
            api_key = prompt(API_KEY_PROMPT).strip()
        except (EOFError, KeyboardInterrupt):
            return CredentialResult(CredentialStatus.FAILED, source="prompt",
                                    message="No API key entered")
        if not api_key:
            return CredentialResult(CredentialStatus.FAILED, source="prompt",
                                    message="No API key entered")
        return self.store(api_key)

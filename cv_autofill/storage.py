"""Host-shell persistence: the loaded profile and last-used options.

The autofill core never touches storage. The CLI remembers the last profile
path and the last options between runs, the way the browser popup kept them
in extension storage, and hands them to the core as plain inputs.
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ValidationError

from cv_autofill.exceptions import ProfileLoadError
from cv_autofill.profile.models import ApplicationOptions, Profile

logger = logging.getLogger(__name__)

# Fixed storage keys
PROFILE_PATH_KEY = "cvPath"
OPTIONS_KEY = "options"


def load_profile(path: str | Path) -> Profile:
    """Read and validate a JSON-Resume document.

    Malformed JSON is rejected here and never reaches the core.

    Raises:
        ProfileLoadError: If the file is unreadable, not JSON or not a profile
    """
    path = Path(path).expanduser()
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ProfileLoadError(f"Cannot read {path}: {e}", path=str(path)) from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ProfileLoadError(f"Invalid JSON format: {e}", path=str(path)) from e

    if not isinstance(data, dict):
        raise ProfileLoadError("Profile must be a JSON object", path=str(path))

    try:
        return Profile.model_validate(data)
    except ValidationError as e:
        raise ProfileLoadError(f"Not a valid profile: {e}", path=str(path)) from e


class StoredState(BaseModel):
    """What the host shell remembers between runs."""

    cv_path: str | None = None
    options: dict[str, Any] = {}


class PreferenceStore:
    """JSON-file store for the last profile path and options.

    Usage:
        store = PreferenceStore("~/.cv_autofill")
        options = store.load_options(expectedSalary="20000")
        store.save_options(options)
    """

    def __init__(self, storage_dir: str | Path):
        self.storage_dir = Path(storage_dir).expanduser()
        self.path = self.storage_dir / "state.json"

    def _read(self) -> StoredState:
        if not self.path.exists():
            return StoredState()
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
            return StoredState(
                cv_path=data.get(PROFILE_PATH_KEY),
                options=data.get(OPTIONS_KEY) or {},
            )
        except (OSError, json.JSONDecodeError, ValidationError, AttributeError) as e:
            logger.warning(f"Ignoring unreadable state file {self.path}: {e}")
            return StoredState()

    def _write(self, state: StoredState) -> None:
        self.storage_dir.mkdir(parents=True, exist_ok=True)
        payload = {PROFILE_PATH_KEY: state.cv_path, OPTIONS_KEY: state.options}
        self.path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
        logger.debug(f"State saved to {self.path}")

    def last_profile_path(self) -> str | None:
        return self._read().cv_path

    def remember_profile(self, path: str | Path) -> None:
        state = self._read()
        state.cv_path = str(Path(path).expanduser().resolve())
        self._write(state)

    def load_options(self, **overrides: Any) -> ApplicationOptions:
        """Last saved options, with non-None ``overrides`` (camelCase keys) applied."""
        stored = self._read().options
        merged = {**stored, **{k: v for k, v in overrides.items() if v is not None}}
        try:
            return ApplicationOptions.model_validate(merged)
        except ValidationError as e:
            logger.warning(f"Stored options are invalid, using defaults: {e}")
            return ApplicationOptions.model_validate(
                {k: v for k, v in overrides.items() if v is not None}
            )

    def save_options(self, options: ApplicationOptions) -> None:
        state = self._read()
        state.options = options.model_dump(by_alias=True)
        self._write(state)

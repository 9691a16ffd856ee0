"""JSON file-based storage adapter — implements SurveyStorePort."""

import json
import os
import tempfile
from pathlib import Path
from typing import Dict, Optional

USER_SURVEY_FILE = "user_survey_state"


class JsonSurveyStore:
    """Per-user survey state kept in a single JSON object file."""

    def __init__(self, storage_dir: str = "memory", name: str = USER_SURVEY_FILE):
        self._storage_dir = Path(storage_dir)
        self._storage_dir.mkdir(parents=True, exist_ok=True)
        self._name = name

    @property
    def path(self) -> Path:
        return self._storage_dir / f"{self._name}.json"

    def _load_all(self) -> Dict[str, dict]:
        if not self.path.exists():
            return {}
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
            return raw if isinstance(raw, dict) else {}
        except Exception:
            return {}

    def _save_all(self, data: Dict[str, dict]) -> None:
        path = self.path
        path.parent.mkdir(parents=True, exist_ok=True)
        content = json.dumps(data, ensure_ascii=False, indent=2)
        # Atomic write
        fd, tmp_path = tempfile.mkstemp(
            dir=str(path.parent), suffix=".tmp",
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(content)
            os.replace(tmp_path, str(path))
        except BaseException:
            try:
                os.unlink(tmp_path)
            except OSError:
                pass
            raise

    def get_user_state(self, user_id: str) -> Optional[dict]:
        state = self._load_all().get(user_id)
        return dict(state) if isinstance(state, dict) else None

    def set_user_state(self, user_id: str, state: dict) -> None:
        data = self._load_all()
        data[user_id] = dict(state)
        self._save_all(data)

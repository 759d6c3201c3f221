"""Profile loading utilities for compatibility and ranking."""

from __future__ import annotations

import json
from pathlib import Path

import yaml

from brightmatch.matching.models import RankedProfile


class ProfileService:
    """Service for loading profile score fields from YAML or JSON files."""

    def load_profile(self, path: Path | str) -> RankedProfile:
        """Load and validate a single profile mapping."""
        profile_path = Path(path)
        data = self._load(profile_path)
        if not isinstance(data, dict):
            raise ValueError(f"Profile must be a mapping/dict: {profile_path}")
        data.setdefault("user_id", profile_path.stem)
        return RankedProfile.model_validate(data)

    def load_profiles(self, path: Path | str) -> list[RankedProfile]:
        """Load a list of profiles (a list, or a mapping with a ``profiles`` key)."""
        profiles_path = Path(path)
        data = self._load(profiles_path)
        if isinstance(data, dict):
            data = data.get("profiles")
        if not isinstance(data, list):
            raise ValueError(f"Profiles file must contain a list: {profiles_path}")
        return [RankedProfile.model_validate(item) for item in data]

    def _load(self, path: Path) -> object:
        if not path.exists():
            raise FileNotFoundError(f"Profile not found: {path}")

        raw = path.read_text(encoding="utf-8")
        suffix = path.suffix.lower()
        if suffix == ".json" or (
            suffix not in {".yaml", ".yml"} and raw.lstrip().startswith(("{", "["))
        ):
            try:
                return json.loads(raw)
            except json.JSONDecodeError as e:
                if suffix == ".json":
                    raise ValueError(f"Invalid JSON profile: {path}") from e

        try:
            data = yaml.safe_load(raw)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML profile: {path}") from e
        return {} if data is None else data

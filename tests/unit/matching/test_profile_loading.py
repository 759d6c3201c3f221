"""Tests for ProfileService."""

import json

import pytest


class TestLoadProfile:
    """Test loading a single profile."""

    def test_load_yaml_profile(self, tmp_path):
        """YAML profiles load into RankedProfile."""
        from brightmatch.matching.models import Intent
        from brightmatch.matching.profile import ProfileService

        profile_file = tmp_path / "alice.yaml"
        profile_file.write_text(
            """
name: Alice
iq_score: 128
eq_score: 82
mbti_type: enfp
intent: dating
"""
        )

        profile = ProfileService().load_profile(profile_file)

        assert profile.user_id == "alice"
        assert profile.name == "Alice"
        assert profile.mbti_type == "ENFP"
        assert profile.intent is Intent.DATING

    def test_load_json_profile(self, tmp_path):
        """JSON profiles keep an explicit user_id."""
        from brightmatch.matching.profile import ProfileService

        profile_file = tmp_path / "bob.json"
        profile_file.write_text(json.dumps({"user_id": 7, "iq_score": 135}))

        profile = ProfileService().load_profile(profile_file)

        assert profile.user_id == "7"
        assert profile.iq_score == 135

    def test_empty_yaml_is_an_empty_profile(self, tmp_path):
        """An empty file is a profile with no data."""
        from brightmatch.matching.profile import ProfileService

        profile_file = tmp_path / "blank.yaml"
        profile_file.write_text("")

        profile = ProfileService().load_profile(profile_file)

        assert profile.user_id == "blank"
        assert profile.has_iq is False

    def test_missing_file_raises(self, tmp_path):
        """A missing profile raises FileNotFoundError."""
        from brightmatch.matching.profile import ProfileService

        with pytest.raises(FileNotFoundError):
            ProfileService().load_profile(tmp_path / "nobody.yaml")

    def test_invalid_json_raises(self, tmp_path):
        """Malformed JSON raises ValueError."""
        from brightmatch.matching.profile import ProfileService

        bad = tmp_path / "bad.json"
        bad.write_text("{nope")

        with pytest.raises(ValueError, match="Invalid JSON profile"):
            ProfileService().load_profile(bad)

    def test_invalid_yaml_raises(self, tmp_path):
        """Malformed YAML raises ValueError."""
        from brightmatch.matching.profile import ProfileService

        bad = tmp_path / "bad.yaml"
        bad.write_text("name: [unclosed\n")

        with pytest.raises(ValueError, match="Invalid YAML profile"):
            ProfileService().load_profile(bad)

    def test_list_is_not_a_profile(self, tmp_path):
        """A single profile must be a mapping."""
        from brightmatch.matching.profile import ProfileService

        bad = tmp_path / "list.yaml"
        bad.write_text("- 1\n- 2\n")

        with pytest.raises(ValueError, match="mapping"):
            ProfileService().load_profile(bad)


class TestLoadProfiles:
    """Test loading a profile list."""

    def test_load_list(self, tmp_path):
        """A top-level list loads every entry."""
        from brightmatch.matching.profile import ProfileService

        profiles_file = tmp_path / "profiles.yaml"
        profiles_file.write_text(
            """
- user_id: a
  iq_score: 120
  eq_score: 70
  profile_completed: true
- user_id: b
  iq_score: 100
"""
        )

        profiles = ProfileService().load_profiles(profiles_file)

        assert [p.user_id for p in profiles] == ["a", "b"]
        assert profiles[0].profile_completed is True

    def test_load_mapping_with_profiles_key(self, tmp_path):
        """A mapping with a profiles key also works."""
        from brightmatch.matching.profile import ProfileService

        profiles_file = tmp_path / "profiles.json"
        profiles_file.write_text(json.dumps({"profiles": [{"user_id": "z"}]}))

        profiles = ProfileService().load_profiles(profiles_file)

        assert profiles[0].user_id == "z"

    def test_non_list_raises(self, tmp_path):
        """Anything other than a list of profiles is rejected."""
        from brightmatch.matching.profile import ProfileService

        bad = tmp_path / "profiles.yaml"
        bad.write_text("user_id: solo\n")

        with pytest.raises(ValueError, match="must contain a list"):
            ProfileService().load_profiles(bad)

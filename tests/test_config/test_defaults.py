"""Tests for package defaults."""

from refdocs.config.defaults import DEFAULT_TTL_SECONDS, get_defaults


class TestDefaults:
    def test_ttl_is_five_minutes(self):
        assert DEFAULT_TTL_SECONDS == 300.0

    def test_get_defaults_keys(self):
        defaults = get_defaults()
        assert defaults["ttl_seconds"] == 300.0
        assert defaults["resources_dir"] is None
        assert defaults["catalog"] is None
        assert defaults["server_name"] == "refdocs"
        assert defaults["log_level"] == "WARNING"

    def test_returns_fresh_dict(self):
        a = get_defaults()
        a["ttl_seconds"] = 1
        assert get_defaults()["ttl_seconds"] == 300.0

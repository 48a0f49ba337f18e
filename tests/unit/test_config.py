"""
Unit tests for BM25 settings, env loading and error types.
"""

import pytest
from pydantic import ValidationError

from okapi_index.config import BM25Settings, load_env_file, load_settings
from okapi_index.errors import (
    DuplicateDocument,
    DuplicateDocumentError,
    InvalidConfig,
    InvalidConfigError,
    OkapiIndexError,
)


class TestBM25Settings:
    """Test validation of k and b"""

    def test_defaults(self):
        """Test default constants"""
        settings = BM25Settings()
        assert settings.k == 1.5
        assert settings.b == 0.75

    def test_build_drops_none(self):
        """Test None falls back to defaults"""
        settings = BM25Settings.build(k=None, b=0.3)
        assert (settings.k, settings.b) == (1.5, 0.3)

    def test_build_parses_strings(self):
        """Test numeric strings (as read from env) are accepted"""
        settings = BM25Settings.build(k="1.2", b="0.5")
        assert (settings.k, settings.b) == (1.2, 0.5)

    def test_negative_k(self):
        """Test k < 0 is rejected with field details"""
        with pytest.raises(InvalidConfigError) as exc_info:
            BM25Settings.build(k=-1)

        assert [field for field, _ in exc_info.value.errors] == ["k"]
        assert "k" in str(exc_info.value)

    @pytest.mark.parametrize("b", [-0.01, 1.01, float("nan")])
    def test_b_out_of_range(self, b):
        """Test b outside [0, 1] is rejected"""
        with pytest.raises(InvalidConfigError):
            BM25Settings.build(b=b)

    def test_not_a_number(self):
        """Test garbage input is a config error"""
        with pytest.raises(InvalidConfigError):
            BM25Settings.build(k="fast")

    def test_unknown_field(self):
        """Test typos in parameter names are not silently ignored"""
        with pytest.raises(InvalidConfigError):
            BM25Settings.build(k1=1.2)

    def test_frozen(self):
        """Test settings cannot change after construction"""
        settings = BM25Settings()
        with pytest.raises(ValidationError):
            settings.k = 3.0


class TestLoadSettings:
    """Test settings from environment and env files"""

    def test_defaults_without_env(self):
        """Test no env vars and no env file gives defaults"""
        assert load_settings() == BM25Settings()

    def test_environment_variables(self, monkeypatch):
        """Test BM25_K / BM25_B are read"""
        monkeypatch.setenv("BM25_K", "1.2")
        monkeypatch.setenv("BM25_B", "0.4")

        settings = load_settings()

        assert (settings.k, settings.b) == (1.2, 0.4)

    def test_empty_variable_uses_default(self, monkeypatch):
        """Test an empty BM25_K is treated as unset"""
        monkeypatch.setenv("BM25_K", "")
        assert load_settings().k == 1.5

    def test_invalid_environment(self, monkeypatch):
        """Test invalid env values raise InvalidConfigError"""
        monkeypatch.setenv("BM25_B", "2")
        with pytest.raises(InvalidConfigError):
            load_settings()

    def test_dotenv_file(self, tmp_path):
        """Test .env in the working directory is loaded"""
        (tmp_path / ".env").write_text("BM25_K=2.0\n")

        assert load_settings().k == 2.0

    def test_dotenv_file_overrides_environment(self, tmp_path, monkeypatch):
        """Test env file values replace variables already in the environment"""
        monkeypatch.setenv("BM25_K", "0.5")
        (tmp_path / ".env").write_text("BM25_K=2.0\n")

        assert load_settings().k == 2.0

    def test_dotenv_local_preferred(self, tmp_path):
        """Test .env.local wins over .env"""
        (tmp_path / ".env").write_text("BM25_K=2.0\n")
        (tmp_path / ".env.local").write_text("BM25_K=0.9\n")

        assert load_env_file() == tmp_path / ".env.local"
        assert load_settings().k == 0.9

    def test_explicit_env_file(self, tmp_path):
        """Test an explicit env file path"""
        env_file = tmp_path / "custom.env"
        env_file.write_text("BM25_B=0.1\n")

        assert load_settings(env_file).b == 0.1

    def test_missing_env_file(self, tmp_path):
        """Test a missing explicit env file is not an error"""
        assert load_env_file(tmp_path / "nope.env") is None


class TestErrors:
    """Test error hierarchy"""

    def test_duplicate_document(self):
        """Test DuplicateDocumentError fields and bases"""
        error = DuplicateDocumentError(7)

        assert error.doc_id == 7
        assert isinstance(error, OkapiIndexError)
        assert isinstance(error, KeyError)
        assert "7" in str(error)
        assert not str(error).startswith("'")

    def test_invalid_config(self):
        """Test InvalidConfigError is a ValueError"""
        error = InvalidConfigError("bad", [("k", "too small")])

        assert isinstance(error, ValueError)
        assert error.errors == [("k", "too small")]

    def test_short_aliases(self):
        """Test short names refer to the same classes"""
        assert DuplicateDocument is DuplicateDocumentError
        assert InvalidConfig is InvalidConfigError

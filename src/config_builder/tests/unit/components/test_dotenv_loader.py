# ABOUTME: Unit tests for loading the optional .env file
# ABOUTME: Tests KEY=VALUE and JSON formats, overwriting and malformed files

import pytest

from config_builder.components.dotenv_loader import load_dotenv_file, read_dotenv_file
from config_builder.exceptions import InvalidSettingsDocumentError
from config_builder.implementations.memory.config import InMemoryEnvironmentProvider
from tests.fixtures.config_tree import write_text


class TestReadDotenvFile:
    """Test suite for read_dotenv_file."""

    @pytest.mark.unit
    def test_key_value_lines(self, tmp_path):
        path = write_text(
            tmp_path / ".env",
            "# comment\nTEST=abc\nexport QUOTED=\"hello world\"\nEMPTY=\nNO_VALUE\n",
        )

        assert read_dotenv_file(path) == {"TEST": "abc", "QUOTED": "hello world", "EMPTY": ""}

    @pytest.mark.unit
    def test_json_object(self, tmp_path):
        path = write_text(
            tmp_path / ".env",
            '{"TEST": "abc", "PORT": 8080, "DEBUG": true, "UNSET": null}',
        )

        assert read_dotenv_file(path) == {"TEST": "abc", "PORT": "8080", "DEBUG": "true"}

    @pytest.mark.unit
    def test_variable_references_are_not_expanded(self, tmp_path):
        path = write_text(tmp_path / ".env", "A=1\nB=${A}\n")

        assert read_dotenv_file(path) == {"A": "1", "B": "${A}"}

    @pytest.mark.unit
    @pytest.mark.parametrize("text", ["{broken", "  {\"a\": "])
    def test_malformed_json(self, tmp_path, text):
        """Test a file that starts like a JSON object must parse as one."""
        path = write_text(tmp_path / ".env", text)

        with pytest.raises(InvalidSettingsDocumentError, match=r"\.env is not a valid JSON file"):
            read_dotenv_file(path)


class TestLoadDotenvFile:
    """Test suite for load_dotenv_file."""

    @pytest.mark.unit
    def test_missing_file_is_ignored(self, tmp_path):
        environ = InMemoryEnvironmentProvider({"A": "1"})

        assert load_dotenv_file(tmp_path, environ) == 0
        assert environ.as_dict() == {"A": "1"}

    @pytest.mark.unit
    def test_values_overwrite_existing(self, tmp_path):
        write_text(tmp_path / ".env", "A=from_file\nB=2\n")
        environ = InMemoryEnvironmentProvider({"A": "original", "C": "3"})

        assert load_dotenv_file(tmp_path, environ) == 2
        assert environ.as_dict() == {"A": "from_file", "B": "2", "C": "3"}

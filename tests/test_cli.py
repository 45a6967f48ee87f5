"""
Command-line interface tests.
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from torussql.cli import main


class TestCompileCommand:
    """compile subcommand tests."""

    def test_hex_output(self, capsys):
        assert main(["compile", 'CREATE DATABASE "MyDB";']) == 0
        assert capsys.readouterr().out.strip() == "0101044d794442"

    def test_bytes_output(self, capsys):
        assert main(["compile", "--format", "bytes", 'CREATE DATABASE "MyDB"']) == 0
        assert capsys.readouterr().out.strip() == "01 01 04 4d 79 44 42"

    def test_words_output(self, capsys):
        assert main(["compile", "--format", "words", 'CREATE DATABASE "MyDB"']) == 0
        assert capsys.readouterr().out.strip() == "0x4D040101 0x00424479"

    def test_from_file(self, tmp_path, capsys):
        path = tmp_path / "create.sql"
        path.write_text('create database "MyDB";', encoding="utf-8")
        assert main(["compile", "--file", str(path)]) == 0
        assert capsys.readouterr().out.strip() == "0101044d794442"

    def test_missing_file(self, tmp_path, capsys):
        missing = tmp_path / "missing.sql"
        assert main(["compile", "--file", str(missing)]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err.startswith("error: ")
        assert "missing.sql" in captured.err

    def test_file_error_names_file(self, tmp_path, capsys):
        path = tmp_path / "empty.sql"
        path.write_text('CREATE DATABASE ""', encoding="utf-8")
        assert main(["compile", "--file", str(path)]) == 1
        assert "empty.sql:1:17: Empty string literal" in capsys.readouterr().err

    def test_rejected_statement(self, capsys):
        assert main(["compile", "SELECT * FROM t;"]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err.startswith("error: ")

    def test_strict(self, capsys):
        assert main(["compile", "--strict", 'CREATE DATABASE "MyDB"']) == 1
        assert "Expected ';'" in capsys.readouterr().err


class TestTokensCommand:
    """tokens subcommand tests."""

    def test_lists_tokens(self, capsys):
        assert main(["tokens", 'CREATE DATABASE "MyDB";']) == 0
        lines = capsys.readouterr().out.strip().splitlines()
        assert len(lines) == 5
        assert lines[0].startswith("Token(KEYWORD")
        assert lines[2].startswith("Token(STRING, 'MyDB'")
        assert lines[-1].startswith("Token(END")

    def test_lexing_error(self, capsys):
        assert main(["tokens", '"open']) == 1
        assert "Unterminated string" in capsys.readouterr().err


class TestDecodeCommand:
    """decode subcommand tests."""

    def test_decode(self, capsys):
        assert main(["decode", "0101044d794442"]) == 0
        out = capsys.readouterr().out
        assert "language_type: DDL" in out
        assert "kind: CREATE_DATABASE" in out
        assert "operand: 'MyDB'" in out

    def test_invalid_hex(self, capsys):
        assert main(["decode", "zz"]) == 1
        assert capsys.readouterr().err.startswith("error: ")

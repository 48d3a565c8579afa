"""End-to-end integration tests."""

from __future__ import annotations

import os
import subprocess
import sys
from urllib.parse import parse_qsl, unquote, unquote_plus

import pytest

from urlencoder import UrlCodec, decode, encode

UTF8_ENV = {**os.environ, "PYTHONIOENCODING": "utf-8"}


class TestInterop:
    """Encoded output is read correctly by other decoders."""

    @pytest.mark.parametrize(
        "text",
        ["a test &", "%#okékÉȢ smile!😁", "~user/path?x=1", "1+1 = 2", "日本語"],
    )
    def test_urllib_unquote(self, text: str) -> None:
        """Standard library URI decoding agrees."""
        assert unquote(encode(text)) == text

    @pytest.mark.parametrize("text", ["a test &", "1+1 = 2", "naïve café"])
    def test_urllib_unquote_plus(self, text: str) -> None:
        """Standard library form decoding agrees, with or without plus."""
        assert unquote_plus(encode(text)) == text
        assert unquote_plus(encode(text, space_to_plus=True)) == text

    def test_query_string(self) -> None:
        """Build a form query string and parse it back."""
        codec = UrlCodec.form()
        params = [("q", "rock & roll"), ("tag", "~dev+ops"), ("emoji", "😁")]
        query = "&".join(f"{codec.encode(k)}={codec.encode(v)}" for k, v in params)

        assert query == "q=rock+%26+roll&tag=%7Edev%2Bops&emoji=%F0%9F%98%81"
        assert parse_qsl(query) == params
        pairs = [pair.split("=") for pair in query.split("&")]
        assert [(codec.decode(k), codec.decode(v)) for k, v in pairs] == params

    def test_decodes_foreign_lowercase(self) -> None:
        """Lowercase escapes from other encoders decode."""
        assert decode("%e6%97%a5%e6%9c%ac") == "日本"


class TestCommandLine:
    """Encode then decode through the command line."""

    @pytest.mark.parametrize("text", ["a test &", "%#okékÉȢ smile!😁"])
    def test_cli_roundtrip(self, text: str) -> None:
        """Output of -e fed to -d gives the input back."""
        encoded = subprocess.run(
            [sys.executable, "-m", "urlencoder.cli.main", "-e", text],
            capture_output=True,
            text=True,
            encoding="utf-8",
            env=UTF8_ENV,
        )
        assert encoded.returncode == 0

        decoded = subprocess.run(
            [sys.executable, "-m", "urlencoder.cli.main", "-d", encoded.stdout.rstrip("\n")],
            capture_output=True,
            text=True,
            encoding="utf-8",
            env=UTF8_ENV,
        )
        assert decoded.returncode == 0
        assert decoded.stdout.rstrip("\n") == text

    def test_cli_malformed(self) -> None:
        """A malformed escape exits with status 2."""
        result = subprocess.run(
            [sys.executable, "-m", "urlencoder.cli.main", "-d", "sdkjfh%6"],
            capture_output=True,
            text=True,
        )
        assert result.returncode == 2
        assert "Error:" in result.stderr

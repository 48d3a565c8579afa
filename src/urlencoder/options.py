"""Reusable codec options.

UrlCodec bundles the encoder and decoder options into one validated, immutable
object so a caller can configure the codec once and pass it around.
"""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from .codec.charset import RFC3986_UNRESERVED_CHARS, UNRESERVED_CHARS
from .codec.decoder import decode
from .codec.encoder import encode

Profile = Literal["form", "rfc3986"]


class UrlCodec(BaseModel):
    """Configured percent-encoding codec.

    Attributes:
        allow: Extra characters the encoder leaves unescaped
        space_to_plus: Encode spaces as ``+``
        plus_to_space: Decode ``+`` as a space
        profile: ``"form"`` (default) escapes ``~``; ``"rfc3986"`` keeps it

    Example:
        >>> codec = UrlCodec(allow="/", profile="rfc3986")
        >>> codec.encode("~user/a b")
        '~user/a%20b'
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        strict=True,
    )

    allow: str = ""
    space_to_plus: bool = False
    plus_to_space: bool = False
    profile: Profile = "form"

    @field_validator("allow")
    @classmethod
    def _check_allow(cls, value: str) -> str:
        if "%" in value:
            raise ValueError("'%' cannot be allowed unescaped, decoding would be ambiguous")
        return value

    @model_validator(mode="after")
    def _check_plus(self) -> "UrlCodec":
        if self.space_to_plus and "+" in self.allow:
            raise ValueError("'+' cannot be allowed unescaped when space_to_plus is set")
        return self

    @classmethod
    def form(cls, allow: str = "") -> "UrlCodec":
        """Codec for application/x-www-form-urlencoded values (space as ``+``)."""
        return cls(allow=allow, space_to_plus=True, plus_to_space=True)

    @classmethod
    def rfc3986(cls, allow: str = "") -> "UrlCodec":
        """Codec that keeps the full RFC 3986 unreserved set, ``~`` included."""
        return cls(allow=allow, profile="rfc3986")

    @property
    def safe_chars(self) -> frozenset[str]:
        """Every character the encoder leaves as-is."""
        base = RFC3986_UNRESERVED_CHARS if self.profile == "rfc3986" else UNRESERVED_CHARS
        return base | frozenset(self.allow)

    def _encoder_allow(self) -> str:
        if self.profile == "rfc3986":
            return self.allow + "~"
        return self.allow

    def encode(self, source: Optional[str]) -> Optional[str]:
        """Encode ``source`` with this codec's options."""
        return encode(source, allow=self._encoder_allow(), space_to_plus=self.space_to_plus)

    def decode(self, source: Optional[str]) -> Optional[str]:
        """Decode ``source`` with this codec's options."""
        return decode(source, plus_to_space=self.plus_to_space)

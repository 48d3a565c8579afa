"""Basic urlencoder usage example."""

from __future__ import annotations

from urlencoder import MalformedEscapeError, UrlCodec, decode, encode


def main() -> None:
    """Demonstrate encoding, decoding and codec options."""
    print("=" * 60)
    print("urlencoder: Basic Usage")
    print("=" * 60)

    text = "%#okékÉȢ smile!😁"
    encoded = encode(text)
    print(f"\nencode({text!r})")
    print(f"  -> {encoded}")
    print(f"decode back -> {decode(encoded)!r}")

    # Unreserved-only text is returned without copying
    path = "report-2024_v1.pdf"
    print(f"\nencode({path!r}) is input: {encode(path) is path}")

    # Keep query delimiters
    print(f"\nencode('?test=a test', allow='?=') -> {encode('?test=a test', allow='?=')}")

    # Form encoding
    form = UrlCodec.form()
    params = {"q": "rock & roll", "page": "2"}
    query = "&".join(f"{form.encode(k)}={form.encode(v)}" for k, v in params.items())
    print(f"\nform query: {query}")

    # RFC 3986 profile keeps '~'
    print(f"rfc3986: {UrlCodec.rfc3986(allow='/').encode('~user/docs & notes')}")

    # Malformed input
    for bad in ("sdkjfh%", "sdkjfh%6", "sdkjfh%xx"):
        try:
            decode(bad)
        except MalformedEscapeError as e:
            print(f"\ndecode({bad!r}) failed: {e}")


if __name__ == "__main__":
    main()

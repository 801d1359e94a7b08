"""Content type sniffing from the leading bytes of a file."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

SNIFF_LEN = 512

_WHITESPACE = b"\t\n\x0c\r "
_TAG_TERMINATORS = b" >"
_HTML = "text/html; charset=utf-8"
_TEXT = "text/plain; charset=utf-8"
_FALLBACK = "application/octet-stream"


@dataclass(frozen=True)
class _ExactSig:
    signature: bytes
    content_type: str

    def match(self, data: bytes, first_non_ws: int) -> str | None:
        return self.content_type if data.startswith(self.signature) else None


@dataclass(frozen=True)
class _MaskedSig:
    mask: bytes
    pattern: bytes
    content_type: str
    skip_ws: bool = False

    def match(self, data: bytes, first_non_ws: int) -> str | None:
        if self.skip_ws:
            data = data[first_non_ws:]
        if len(self.pattern) != len(self.mask) or len(data) < len(self.pattern):
            return None
        if all(d & m == p for d, m, p in zip(data, self.mask, self.pattern)):
            return self.content_type
        return None


@dataclass(frozen=True)
class _HtmlSig:
    pattern: bytes

    def match(self, data: bytes, first_non_ws: int) -> str | None:
        data = data[first_non_ws:]
        size = len(self.pattern)
        if len(data) < size + 1:
            return None
        for want, got in zip(self.pattern, data):
            if 0x41 <= want <= 0x5A:
                got &= 0xDF
            if want != got:
                return None
        if data[size] not in _TAG_TERMINATORS:
            return None
        return _HTML


class _Mp4Sig:
    def match(self, data: bytes, first_non_ws: int) -> str | None:
        if len(data) < 12:
            return None
        box_size = int.from_bytes(data[:4], "big")
        if len(data) < box_size or box_size % 4 != 0:
            return None
        if data[4:8] != b"ftyp":
            return None
        for start in range(8, box_size, 4):
            if start == 12:
                # The major brand's version number is not a brand.
                continue
            if data[start : start + 3] == b"mp4":
                return "video/mp4"
        return None


class _TextSig:
    def match(self, data: bytes, first_non_ws: int) -> str | None:
        for byte in data[first_non_ws:]:
            if (
                byte <= 0x08
                or byte == 0x0B
                or 0x0E <= byte <= 0x1A
                or 0x1C <= byte <= 0x1F
            ):
                return None
        return _TEXT


_SIGNATURES: Sequence[_ExactSig | _MaskedSig | _HtmlSig | _Mp4Sig | _TextSig] = (
    *(
        _HtmlSig(tag)
        for tag in (
            b"<!DOCTYPE HTML",
            b"<HTML",
            b"<HEAD",
            b"<SCRIPT",
            b"<IFRAME",
            b"<H1",
            b"<DIV",
            b"<FONT",
            b"<TABLE",
            b"<A",
            b"<STYLE",
            b"<TITLE",
            b"<B",
            b"<BODY",
            b"<BR",
            b"<P",
            b"<!--",
        )
    ),
    _MaskedSig(b"\xff\xff\xff\xff\xff", b"<?xml", "text/xml; charset=utf-8", skip_ws=True),
    _ExactSig(b"%PDF-", "application/pdf"),
    _ExactSig(b"%!PS-Adobe-", "application/postscript"),
    _MaskedSig(b"\xff\xff\x00\x00", b"\xfe\xff\x00\x00", "text/plain; charset=utf-16be"),
    _MaskedSig(b"\xff\xff\x00\x00", b"\xff\xfe\x00\x00", "text/plain; charset=utf-16le"),
    _MaskedSig(b"\xff\xff\xff\x00", b"\xef\xbb\xbf\x00", "text/plain; charset=utf-8"),
    _ExactSig(b"\x00\x00\x01\x00", "image/x-icon"),
    _ExactSig(b"\x00\x00\x02\x00", "image/x-icon"),
    _ExactSig(b"BM", "image/bmp"),
    _ExactSig(b"GIF87a", "image/gif"),
    _ExactSig(b"GIF89a", "image/gif"),
    _MaskedSig(
        b"\xff\xff\xff\xff\x00\x00\x00\x00\xff\xff\xff\xff\xff\xff",
        b"RIFF\x00\x00\x00\x00WEBPVP",
        "image/webp",
    ),
    _ExactSig(b"\x89PNG\x0d\x0a\x1a\x0a", "image/png"),
    _ExactSig(b"\xff\xd8\xff", "image/jpeg"),
    _MaskedSig(b"\xff\xff\xff\xff", b".snd", "audio/basic"),
    _MaskedSig(
        b"\xff\xff\xff\xff\x00\x00\x00\x00\xff\xff\xff\xff",
        b"FORM\x00\x00\x00\x00AIFF",
        "audio/aiff",
    ),
    _MaskedSig(b"\xff\xff\xff", b"ID3", "audio/mpeg"),
    _MaskedSig(b"\xff\xff\xff\xff\xff", b"OggS\x00", "application/ogg"),
    _MaskedSig(b"\xff" * 8, b"MThd\x00\x00\x00\x06", "audio/midi"),
    _MaskedSig(
        b"\xff\xff\xff\xff\x00\x00\x00\x00\xff\xff\xff\xff",
        b"RIFF\x00\x00\x00\x00AVI ",
        "video/avi",
    ),
    _MaskedSig(
        b"\xff\xff\xff\xff\x00\x00\x00\x00\xff\xff\xff\xff",
        b"RIFF\x00\x00\x00\x00WAVE",
        "audio/wave",
    ),
    _Mp4Sig(),
    _ExactSig(b"\x1a\x45\xdf\xa3", "video/webm"),
    _MaskedSig(b"\x00" * 34 + b"\xff\xff", b"\x00" * 34 + b"LP", "application/vnd.ms-fontobject"),
    _ExactSig(b"\x00\x01\x00\x00", "font/ttf"),
    _ExactSig(b"OTTO", "font/otf"),
    _ExactSig(b"ttcf", "font/collection"),
    _ExactSig(b"wOFF", "font/woff"),
    _ExactSig(b"wOF2", "font/woff2"),
    _ExactSig(b"\x1f\x8b\x08", "application/x-gzip"),
    _ExactSig(b"PK\x03\x04", "application/zip"),
    _ExactSig(b"Rar!\x1a\x07\x00", "application/x-rar-compressed"),
    _ExactSig(b"Rar!\x1a\x07\x01\x00", "application/x-rar-compressed"),
    _ExactSig(b"\x00\x61\x73\x6d", "application/wasm"),
    _TextSig(),
)


def detect_content_type(data: bytes) -> str:
    """Guess the MIME type of ``data`` from at most its first 512 bytes."""
    data = bytes(data[:SNIFF_LEN])
    first_non_ws = len(data) - len(data.lstrip(_WHITESPACE))
    for signature in _SIGNATURES:
        content_type = signature.match(data, first_non_ws)
        if content_type:
            return content_type
    return _FALLBACK
"""Loading share documents into a ShareSet.

Document layout (JSON)::

    {
        "keys": {"n": 4, "k": 3},
        "1": {"base": "10", "value": "4"},
        "2": {"base": "2", "value": "111"},
        ...
    }

Each non-``keys`` entry is one share: the key is x, ``value`` is y written
in ``base``. A malformed share entry is skipped and logged; a malformed
``keys`` block fails the whole document.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from shamir_recovery.models import Share, ShareSet
from shamir_recovery.rational import format_int, unlimited_int_digits

logger = logging.getLogger(__name__)

KEYS_FIELD = "keys"
DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


class ShareFormatError(ValueError):
    """The document or one of its share entries cannot be decoded."""


@dataclass(frozen=True)
class SkippedEntry:
    """A share entry dropped during ingestion, with the reason."""

    key: str
    reason: str


@dataclass(frozen=True)
class SchemeInput:
    """A decoded (k, n) scheme ready for reconstruction.

    Attributes:
        n: Total share count declared by the document.
        k: Reconstruction threshold.
        shares: Decoded shares, ascending by x.
        skipped: Entries that could not be decoded.
    """

    n: int
    k: int
    shares: ShareSet
    skipped: tuple[SkippedEntry, ...] = ()


def _preview(value: str, limit: int = 40) -> str:
    if len(value) <= limit:
        return repr(value)
    return repr(value[:limit] + "...") + f" ({len(value)} chars)"


def decode_value(value: str, base: int) -> int:
    """Decode ``value`` written in ``base`` (2..36) into a non-negative int.

    Only plain digits of the base are accepted: no sign, no ``0x``-style
    prefix, no underscores. Values of any length decode.
    """
    if not 2 <= base <= 36:
        raise ShareFormatError(f"Base must be in [2, 36], got {base}")
    text = value.strip()
    allowed = DIGITS[:base]
    if not text or any(c not in allowed for c in text.lower()):
        raise ShareFormatError(f"Invalid base-{base} value {_preview(value)}")
    with unlimited_int_digits():
        return int(text, base)


def _parse_int(raw: Any, name: str) -> int:
    if isinstance(raw, bool):
        raise ShareFormatError(f"{name} must be an integer, got {raw!r}")
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str):
        try:
            return int(raw.strip())
        except ValueError as exc:
            raise ShareFormatError(f"{name} must be an integer, got {raw!r}") from exc
    raise ShareFormatError(f"{name} must be an integer, got {raw!r}")


def parse_share(key: str, entry: Any) -> Share:
    """Decode one ``"x": {"base": ..., "value": ...}`` entry."""
    x = _parse_int(key, "Share key")
    if not isinstance(entry, Mapping):
        raise ShareFormatError(f"Share {key} must be an object, got {entry!r}")
    if "base" not in entry or "value" not in entry:
        raise ShareFormatError(f"Share {key} needs 'base' and 'value'")
    base = _parse_int(entry["base"], f"Share {key} base")
    value = entry["value"]
    if isinstance(value, int) and not isinstance(value, bool):
        value = format_int(value)
    elif not isinstance(value, str):
        value = str(value)
    try:
        return Share(x=x, y=decode_value(value, base))
    except ShareFormatError:
        raise
    except ValueError as exc:
        raise ShareFormatError(f"Share {key}: {exc}") from exc


def parse_document(data: Mapping[str, Any]) -> SchemeInput:
    """Build a SchemeInput from an already-parsed document."""
    keys = data.get(KEYS_FIELD)
    if not isinstance(keys, Mapping):
        raise ShareFormatError(f"Document needs a '{KEYS_FIELD}' object")
    if "n" not in keys or "k" not in keys:
        raise ShareFormatError(f"'{KEYS_FIELD}' needs both 'n' and 'k'")
    n = _parse_int(keys["n"], "n")
    k = _parse_int(keys["k"], "k")
    if k < 1:
        raise ShareFormatError(f"k must be >= 1, got {k}")

    shares: list[Share] = []
    skipped: list[SkippedEntry] = []
    seen: set[int] = set()
    for key, entry in data.items():
        if key == KEYS_FIELD:
            continue
        try:
            share = parse_share(key, entry)
            if share.x in seen:
                raise ShareFormatError(f"Duplicate share x={share.x}")
        except ShareFormatError as exc:
            logger.warning("Skipping share %s: %s", key, exc)
            skipped.append(SkippedEntry(key=key, reason=str(exc)))
            continue
        seen.add(share.x)
        shares.append(share)
        logger.debug("Decoded share x=%d (%d bits)", share.x, share.y.bit_length())

    if len(shares) < k:
        raise ShareFormatError(
            f"Need at least k={k} decodable shares, got {len(shares)}"
        )
    if len(shares) != n:
        logger.warning("Document declares n=%d but %d shares decoded", n, len(shares))

    return SchemeInput(n=n, k=k, shares=ShareSet(shares), skipped=tuple(skipped))


def load_document(path: str | Path) -> SchemeInput:
    """Read and decode a JSON share document."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
        with unlimited_int_digits():
            data = json.loads(text)
    except UnicodeDecodeError as exc:
        raise ShareFormatError(f"{path}: not valid UTF-8 ({exc})") from exc
    except json.JSONDecodeError as exc:
        raise ShareFormatError(f"{path}: invalid JSON ({exc})") from exc
    if not isinstance(data, Mapping):
        raise ShareFormatError(f"{path}: top level must be an object")
    return parse_document(data)

"""Text and number helpers for the SVG card."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

_XML_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#39;"),
)

_UNITS = ((1_000_000, "M"), (1_000, "k"))


def k_format(num: int) -> str:
    """Compact number: 999 -> "999", 1500 -> "1.5k", 9999 -> "10k", 1000000 -> "1M"."""
    for divisor, suffix in _UNITS:
        if num >= divisor:
            scaled = (Decimal(num) / divisor).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
            text = str(scaled)
            if text.endswith(".0"):
                text = text[:-2]
            return text + suffix
    return str(num)


def escape_xml(text: str) -> str:
    # "&" goes first so the entities introduced below are not escaped again.
    for raw, entity in _XML_ESCAPES:
        text = text.replace(raw, entity)
    return text


def wrap_text(text: str, max_len: int, max_lines: int) -> list[str]:
    """Wrap ``text`` on word boundaries into at most ``max_lines`` lines.

    The last line gets an ellipsis when the text did not fit.
    """
    words = text.split()
    lines: list[str] = []
    current = ""

    for word in words:
        candidate = f"{current} {word}" if current else word
        if len(candidate) <= max_len:
            current = candidate
            continue
        if current:
            lines.append(current)
        current = word
        if len(lines) >= max_lines - 1:
            break

    if current and len(lines) < max_lines:
        lines.append(current)

    if not lines and text:
        lines.append(text[:max_len])

    if len(lines) == max_lines and words:
        last = lines[-1]
        if len(last) > max_len or len(" ".join(words)) > len(" ".join(lines)):
            lines[-1] = last[: max(0, max_len - 1)] + "…"

    return lines

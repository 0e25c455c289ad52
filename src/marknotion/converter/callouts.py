"""Blockquote admonitions that become Notion callouts.

Two conventions are recognised:

GitHub alerts::

    > [!WARNING]
    > Mind the gap.

Emoji-prefixed quotes (opt-in, ``enable_emoji_callouts``)::

    > 🚧 Under construction
"""

from __future__ import annotations

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class CalloutStyle:
    emoji: str
    color: str


GFM_ALERT_STYLES: dict[str, CalloutStyle] = {
    "NOTE": CalloutStyle("\U0001F4D8", "blue_background"),
    "TIP": CalloutStyle("\U0001F4A1", "green_background"),
    "IMPORTANT": CalloutStyle("\u261d\ufe0f", "purple_background"),
    "WARNING": CalloutStyle("\u26a0\ufe0f", "yellow_background"),
    "CAUTION": CalloutStyle("\u2757", "red_background"),
}

EMOJI_COLORS: dict[str, str] = {
    "\U0001F4D8": "blue_background",    # blue book
    "\U0001F4DD": "blue_background",    # memo
    "\u2139\ufe0f": "blue_background",  # information
    "\U0001F4A1": "yellow_background",  # light bulb
    "\U0001F6A7": "yellow_background",  # construction
    "\u26a0\ufe0f": "orange_background",  # warning
    "\u2757": "red_background",         # exclamation mark
    "\u26d4": "red_background",         # no entry
    "\U0001F6A8": "red_background",     # police light
    "\u2705": "green_background",       # check mark
    "\U0001F44D": "green_background",   # thumbs up
    "\u261d\ufe0f": "purple_background",  # index pointing up
}

DEFAULT_CALLOUT_COLOR = "default"

_GFM_ALERT_RE = re.compile(
    r"^[ \t]*\[!(?P<kind>" + "|".join(GFM_ALERT_STYLES) + r")\][ \t]*(?:\n|$)",
    re.IGNORECASE,
)

# One emoji grapheme: a regional-indicator flag pair, a keycap sequence, or a
# pictograph with skin tone and ZWJ chain.  Characters that render as text by
# default only count when followed by U+FE0F.
_PRESENTATION = (
    "[\u231a\u231b\u23e9-\u23ec\u23f0\u23f3\u25fd\u25fe"
    "\u2614\u2615\u2648-\u2653\u267f\u2693\u26a1\u26aa\u26ab"
    "\u26bd\u26be\u26c4\u26c5\u26ce\u26d4\u26ea\u26f2\u26f3"
    "\u26f5\u26fa\u26fd\u2705\u270a\u270b\u2728\u274c\u274e"
    "\u2753-\u2755\u2757\u2795-\u2797\u27b0\u27bf\u2b1b\u2b1c"
    "\u2b50\u2b55"
    "\U0001F004\U0001F0CF\U0001F18E\U0001F191-\U0001F19A\U0001F201"
    "\U0001F21A\U0001F22F\U0001F232-\U0001F236\U0001F238-\U0001F23A"
    "\U0001F250\U0001F251\U0001F300-\U0001F320\U0001F32D-\U0001F335"
    "\U0001F337-\U0001F37C\U0001F37E-\U0001F393\U0001F3A0-\U0001F3CA"
    "\U0001F3CF-\U0001F3D3\U0001F3E0-\U0001F3F0\U0001F3F4"
    "\U0001F3F8-\U0001F43E\U0001F440\U0001F442-\U0001F4FC"
    "\U0001F4FF-\U0001F53D\U0001F54B-\U0001F54E\U0001F550-\U0001F567"
    "\U0001F57A\U0001F595\U0001F596\U0001F5A4\U0001F5FB-\U0001F64F"
    "\U0001F680-\U0001F6C5\U0001F6CC\U0001F6D0-\U0001F6D2"
    "\U0001F6D5-\U0001F6D7\U0001F6DC-\U0001F6DF\U0001F6EB\U0001F6EC"
    "\U0001F6F4-\U0001F6FC\U0001F7E0-\U0001F7EB\U0001F7F0"
    "\U0001F90C-\U0001F93A\U0001F93C-\U0001F945\U0001F947-\U0001F9FF"
    "\U0001FA70-\U0001FA7C\U0001FA80-\U0001FA89\U0001FA8F-\U0001FAC6"
    "\U0001FACE-\U0001FADC\U0001FADF-\U0001FAE9\U0001FAF0-\U0001FAF8]"
)
_TEXT_DEFAULT = (
    "[\u00a9\u00ae\u203c\u2049\u2122\u2139\u2194-\u2199\u21a9\u21aa"
    "\u2328\u23cf\u23ed-\u23ef\u23f1\u23f2\u23f8-\u23fa\u24c2"
    "\u25aa\u25ab\u25b6\u25c0\u25fb\u25fc\u2600-\u2604\u260e"
    "\u2611\u2618\u261d\u2620\u2622\u2623\u2626\u262a\u262e"
    "\u262f\u2638-\u263a\u2640\u2642\u265f\u2660\u2663\u2665"
    "\u2666\u2668\u267b\u267e\u2692\u2694-\u2697\u2699\u269b"
    "\u269c\u26a0\u26a7\u26b0\u26b1\u26c8\u26cf\u26d1\u26d3"
    "\u26e9\u26f0\u26f1\u26f4\u26f7-\u26f9\u2702\u2708\u2709"
    "\u270c\u270d\u270f\u2712\u2714\u2716\u271d\u2721\u2733"
    "\u2734\u2744\u2747\u2763\u2764\u27a1\u2934\u2935"
    "\u2b05-\u2b07\u3030\u303d\u3297\u3299"
    "\U0001F000-\U0001FAFF]"
)
_PICTOGRAPH = (
    "(?:" + _PRESENTATION + "\ufe0f?|" + _TEXT_DEFAULT + "\ufe0f)"
    "[\U0001F3FB-\U0001F3FF]?"
)
_EMOJI_RE = re.compile(
    "^(?:"
    "[\U0001F1E6-\U0001F1FF]{2}"
    "|[0-9#*]\ufe0f?\u20e3"
    "|" + _PICTOGRAPH + "(?:\u200d" + _PICTOGRAPH + ")*"
    ")"
)


@dataclass(frozen=True)
class AlertMatch:
    kind: str
    remainder: str

    @property
    def label(self) -> str:
        return self.kind.title()

    @property
    def style(self) -> CalloutStyle:
        return GFM_ALERT_STYLES[self.kind]


def match_gfm_alert(first_line_text: str) -> AlertMatch | None:
    """Match a ``[!KIND]`` marker at the start of a quote's first text.

    *remainder* is whatever followed the marker line, with leading
    whitespace removed.
    """
    m = _GFM_ALERT_RE.match(first_line_text)
    if m is None:
        return None
    return AlertMatch(
        kind=m.group("kind").upper(),
        remainder=first_line_text[m.end():].lstrip(),
    )


def split_leading_emoji(value: str) -> tuple[str, str] | None:
    """Split *value* into ``(emoji, rest)`` when it starts with an emoji.

    *rest* has its leading whitespace stripped.
    """
    m = _EMOJI_RE.match(value)
    if m is None or not m.group(0):
        return None
    return m.group(0), value[m.end():].lstrip()


def emoji_color(emoji: str) -> str:
    """Background color for a callout icon, ``"default"`` when unmapped."""
    return EMOJI_COLORS.get(emoji, DEFAULT_CALLOUT_COLOR)

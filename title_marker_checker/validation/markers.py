"""
Title marker definitions.

Each marker pairs a loose pattern, which finds any casing or spacing variant of the
marker, with an exact pattern that only finds the canonical form.
"""

import re
from dataclasses import dataclass
from typing import Pattern, Tuple


@dataclass(frozen=True)
class TitleMarkerSpec:
    """A title marker kind and the patterns used to detect it."""

    name: str
    loose_pattern: Pattern
    exact_pattern: Pattern
    canonical_text: str

    def is_incorrectly_formatted(self, text: str) -> bool:
        """Check if the text contains some form of this marker but not the canonical one."""
        return bool(self.loose_pattern.search(text)) and not self.exact_pattern.search(text)


def _marker(name: str, loose: str, canonical_text: str) -> TitleMarkerSpec:
    return TitleMarkerSpec(
        name=name,
        loose_pattern=re.compile(loose, re.IGNORECASE),
        exact_pattern=re.compile(re.escape(canonical_text)),
        canonical_text=canonical_text,
    )


# "(?<!& )" keeps "(Sped Up & Cut Ver.)" from matching the individual cut and sped up markers.
TITLE_MARKERS: Tuple[TitleMarkerSpec, ...] = (
    _marker("tv_size", r"tv (size|ver)", "(TV Size)"),
    _marker("game_ver", r"game (size|ver)", "(Game Ver.)"),
    _marker("short_ver", r"short (size|ver)", "(Short Ver.)"),
    _marker("cut_ver", r"(?<!& )cut (size|ver)", "(Cut Ver.)"),
    _marker("sped_up_ver", r"(?<!& )(sped|speed) ?up ver", "(Sped Up Ver.)"),
)

MARKER_NAMES: Tuple[str, ...] = tuple(marker.name for marker in TITLE_MARKERS)


def get_marker(name: str) -> TitleMarkerSpec:
    """Look up a marker by name."""
    for marker in TITLE_MARKERS:
        if marker.name == name:
            return marker
    raise ValueError(f"Unknown title marker: {name}")

"""
Check metadata and issue templates.

Hosts use the metadata to list and document checks, and the templates to turn
detected problems into user facing messages.
"""

from dataclasses import dataclass, field
from typing import Dict, Tuple

from .models import IssueLevel


@dataclass(frozen=True)
class CheckMetadata:
    """Descriptive information about a check."""

    category: str
    message: str
    author: str
    documentation: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class IssueTemplate:
    """Message format for one kind of issue a check can report."""

    level: IssueLevel
    format_string: str
    argument_names: Tuple[str, ...]
    cause: str = ""

    def format(self, *args) -> str:
        """
        Render the template with the given arguments.

        Raises:
            ValueError: If the number of arguments does not match the template
        """
        if len(args) != len(self.argument_names):
            raise ValueError(
                f"Template expects {len(self.argument_names)} arguments "
                f"({', '.join(self.argument_names)}), got {len(args)}"
            )
        return self.format_string.format(*args)


TITLE_MARKER_METADATA = CheckMetadata(
    category="Metadata",
    message="Incorrect format of (TV Size) / (Game Ver.) / (Short Ver.) / (Cut Ver.) / (Sped Up Ver.) in title.",
    author="Naxess",
    documentation={
        "Purpose": (
            "Standardizing the way metadata is written for ranked content. For example, a song "
            "using \"-TV version-\" as its official metadata becomes \"(TV Size)\" when standardized."
        ),
        "Reasoning": (
            "Small deviations in metadata or obvious mistakes in its formatting or capitalization are "
            "for the most part eliminated through standardization. Standardization also reduces "
            "confusion in case of multiple correct ways to write certain fields and contributes to "
            "making metadata more consistent across official content."
        ),
    },
)

TITLE_MARKER_PROBLEM = IssueTemplate(
    level=IssueLevel.PROBLEM,
    format_string="{0} title field; \"{1}\" incorrect format of \"{2}\".",
    argument_names=("Romanized/unicode", "field", "title marker"),
    cause=(
        "The format of a title marker, in either the romanized or unicode title, is incorrect. "
        "The following are detected formats: (TV Size), (Game Ver.), (Short Ver.), (Cut Ver.), "
        "(Sped Up Ver.)"
    ),
)

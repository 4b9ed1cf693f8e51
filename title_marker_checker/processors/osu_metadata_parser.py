"""
Beatmap metadata parser.

Reads the title fields from the [Metadata] section of .osu beatmap files.
"""

import logging
from pathlib import Path
from typing import Dict, List, Union

from ..config import Config
from ..errors import InputValidationError, error_handler, metadata_parsing_error
from ..models import TitleRecord

logger = logging.getLogger(__name__)


def read_format_version(lines: List[str], source: str = "") -> int:
    """
    Read the file format version from the header line.

    Examples:
        >>> read_format_version(["", "osu file format v14"])
        14
    """
    for line in lines:
        stripped = line.strip()
        if not stripped:
            continue
        if stripped.startswith(Config.FORMAT_HEADER_PREFIX):
            version = stripped[len(Config.FORMAT_HEADER_PREFIX):]
            if version.isdigit():
                return int(version)
        break

    raise metadata_parsing_error(
        "Missing file format header",
        f"Expected the file to start with '{Config.FORMAT_HEADER_PREFIX}<version>'",
        "META_001",
        source,
    )


def read_section(lines: List[str], section_name: str) -> Dict[str, str]:
    """Collect the Key:Value entries of one section."""
    entries: Dict[str, str] = {}
    in_section = False

    for line in lines:
        stripped = line.strip()
        if stripped.startswith("[") and stripped.endswith("]"):
            in_section = stripped[1:-1] == section_name
            continue
        if not in_section or not stripped or stripped.startswith("//"):
            continue
        if ":" in stripped:
            key, value = stripped.split(":", 1)
            entries[key.strip()] = value.strip()

    return entries


def parse_title_record(text: str, source: str = "") -> TitleRecord:
    """
    Parse the title fields of a beatmap from its file contents.

    Args:
        text: Contents of a .osu file
        source: Name used in error messages and validation results

    Returns:
        TitleRecord with the unicode title set to None when the file has no
        TitleUnicode entry

    Raises:
        MetadataParsingError: If the header or the Title entry is missing
    """
    lines = text.lstrip("\ufeff").splitlines()
    version = read_format_version(lines, source)
    metadata = read_section(lines, Config.METADATA_SECTION)

    if "Title" not in metadata:
        raise metadata_parsing_error(
            "Missing title metadata",
            f"No Title entry found in the [{Config.METADATA_SECTION}] section",
            "META_002",
            source,
        )

    logger.debug(f"Parsed metadata from {source or 'text'} (file format v{version})")

    return TitleRecord(
        title=metadata["Title"],
        title_unicode=metadata.get("TitleUnicode"),
        source=source,
    )


def load_title_record(path: Union[str, Path]) -> TitleRecord:
    """Load the title fields of a single .osu file."""
    path = Path(path)
    text = path.read_text(encoding=Config.FILE_ENCODING)
    return parse_title_record(text, source=str(path))


def load_beatmapset_record(directory: Union[str, Path]) -> TitleRecord:
    """
    Load the title fields of a beatmapset folder.

    Title metadata is shared across a set, so only the first difficulty
    (sorted by file name) is read.
    """
    directory = Path(directory)
    beatmap_files = sorted(
        p for p in directory.iterdir()
        if p.is_file() and p.suffix.lower() in Config.SUPPORTED_EXTENSIONS
    )

    if not beatmap_files:
        raise metadata_parsing_error(
            "No beatmap files found",
            f"The folder contains no {', '.join(Config.SUPPORTED_EXTENSIONS)} files: {directory}",
            "META_003",
            str(directory),
        )

    logger.debug(f"Using {beatmap_files[0].name} out of {len(beatmap_files)} difficulties")
    return load_title_record(beatmap_files[0])


def load_record(path: Union[str, Path]) -> TitleRecord:
    """
    Load a record from either a .osu file or a beatmapset folder.

    Raises:
        InputValidationError: If the path is missing or not a beatmap file
        MetadataParsingError: If the beatmap metadata cannot be read
    """
    path_error = error_handler.validate_metadata_path(str(path))
    if path_error:
        raise InputValidationError(path_error)

    path = Path(path)
    if path.is_dir():
        return load_beatmapset_record(path)
    return load_title_record(path)

"""
Processors module for loading beatmap metadata.
"""

from .osu_metadata_parser import (
    parse_title_record,
    load_title_record,
    load_beatmapset_record,
    load_record,
    read_format_version,
)

__all__ = [
    'parse_title_record',
    'load_title_record',
    'load_beatmapset_record',
    'load_record',
    'read_format_version',
]

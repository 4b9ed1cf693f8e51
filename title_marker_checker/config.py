"""
Configuration settings for the Title Marker Checker.
"""


class Config:
    """Configuration class for application settings."""

    # Beatmap file settings
    SUPPORTED_EXTENSIONS = [".osu"]
    FILE_ENCODING = "utf-8-sig"  # Tolerates a leading BOM
    FORMAT_HEADER_PREFIX = "osu file format v"
    METADATA_SECTION = "Metadata"

    # Logging settings
    LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

"""
Application-wide constants.

Grouped into static classes for namespace management and discoverability.
"""


class TranscriptAPIConfig:
    """Configuration for the upstream transcript API."""
    PATH = "/transcript-with-url"
    FLAT_TEXT = "false"  # Ask for timed segments, not a single flattened string
    RETRY_ATTEMPTS = 3
    RETRY_MIN_WAIT = 1  # Seconds
    RETRY_MAX_WAIT = 4


class ChatConfig:
    """Configuration for the transcript chat."""
    DEFAULT_VIDEO_TITLE = "YouTube Video"
    TEMPERATURE = 0.7


class LLMErrorIndicators:
    """
    Substrings looked for (case-insensitive) in upstream LLM error messages.

    The first group that matches decides the error kind.
    """
    API_KEY = ("API_KEY", "API KEY")
    QUOTA = ("QUOTA", "RESOURCE_EXHAUSTED")
    SAFETY = ("SAFETY",)

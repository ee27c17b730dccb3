"""
YouTube URL validation and video id extraction.
"""
import re
from typing import Optional

# Tried in order, first match wins. The id runs until &, ?, # or a newline.
VIDEO_ID_PATTERNS = [
    re.compile(r"(?:youtube\.com/watch\?v=|youtu\.be/|youtube\.com/embed/)([^&\n?#]+)"),
    # watch URLs where v is not the first query parameter
    re.compile(r"youtube\.com/watch\?.*v=([^&\n?#]+)"),
]


def extract_video_id(url: str) -> Optional[str]:
    """
    Extract the video id from a YouTube URL.

    Accepts ``youtube.com/watch?v=<id>``, ``youtu.be/<id>``,
    ``youtube.com/embed/<id>`` and ``youtube.com/watch?...&v=<id>``.
    Matching is case-sensitive and unanchored.

    Args:
        url: The user-supplied URL string.

    Returns:
        The video id, or None when the URL matches none of the patterns.
    """
    if not url:
        return None
    for pattern in VIDEO_ID_PATTERNS:
        match = pattern.search(url)
        if match:
            return match.group(1)
    return None


def is_valid_youtube_url(url: str) -> bool:
    return extract_video_id(url) is not None

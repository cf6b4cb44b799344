"""
Data models for the pairing of video files with subtitle files.
"""
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterator, Tuple


class Classification(Enum):
    """What a directory entry is, judged by its filename alone."""

    VIDEO = "video"
    SUBTITLE = "subtitle"
    IGNORED = "ignored"


def classify(filename: str, video_token: str, sub_token: str) -> Classification:
    """
    Classifies a filename by substring match against the two format tokens.

    The video token is tested first, so a name containing both tokens
    (e.g. "show.mkv.srt" with tokens "mkv"/"srt") is a video.
    """
    if video_token in filename:
        return Classification.VIDEO
    if sub_token in filename:
        return Classification.SUBTITLE
    return Classification.IGNORED


@dataclass(frozen=True)
class PairSet:
    """
    Video and subtitle filenames found in one directory, paired by position.

    Attributes:
        directory: The directory that was scanned.
        videos: Video filenames, sorted.
        subs: Subtitle filenames, sorted. Same length as `videos` once the
              set has been validated by the pairing engine.
    """

    directory: Path
    videos: Tuple[str, ...]
    subs: Tuple[str, ...]

    def __len__(self) -> int:
        return len(self.videos)

    @property
    def pairs(self) -> Iterator[Tuple[str, str]]:
        """(subtitle, video) tuples in pairing order."""
        return zip(self.subs, self.videos)

"""
Provides the service that discovers and pairs video and subtitle files.

The scan is non-recursive: only the immediate children of the target
directory are considered. Each entry is classified by substring match against
the video and subtitle format tokens, both lists are sorted independently, and
the i-th subtitle is paired with the i-th video. No stem matching or fuzzy
correlation is attempted; the sort order is the pairing.
"""

from pathlib import Path
from typing import List, Union

from loguru import logger

from ..config.common import DEFAULT_SUB_FORMAT, DEFAULT_VIDEO_FORMAT
from ..domain.exceptions import MismatchError
from ..domain.pairing import Classification, PairSet, classify


class FilePairing:
    """
    Scans a directory and builds the `PairSet` for it.

    Attributes:
        directory (Path): The absolute directory being scanned.
        video_format (str): Substring identifying video files (e.g. "mkv").
        sub_format (str): Substring identifying subtitle files (e.g. "srt").
        videos (List[str]): Sorted video filenames, filled by `scan()`.
        subs (List[str]): Sorted subtitle filenames, filled by `scan()`.
    """

    def __init__(
        self,
        directory: Union[str, Path],
        video_format: str = DEFAULT_VIDEO_FORMAT,
        sub_format: str = DEFAULT_SUB_FORMAT,
    ):
        self.directory = Path(directory).resolve()
        self.video_format = video_format
        self.sub_format = sub_format
        self.videos: List[str] = []
        self.subs: List[str] = []

    def scan(self):
        """
        Lists the directory once and classifies every entry.

        Raises:
            OSError: If the directory cannot be read (missing, not a directory,
                     permission denied).
        """
        videos: List[str] = []
        subs: List[str] = []
        for entry in self.directory.iterdir():
            name = entry.name
            kind = classify(name, self.video_format, self.sub_format)
            logger.trace(f"  {name}: {kind.value}")
            if kind is Classification.VIDEO:
                videos.append(name)
            elif kind is Classification.SUBTITLE:
                subs.append(name)

        self.videos = sorted(videos)
        self.subs = sorted(subs)
        logger.debug(
            f"Found {len(self.videos)} '{self.video_format}' and {len(self.subs)} "
            f"'{self.sub_format}' file(s) in {self.directory}"
        )

    def validate(self):
        if len(self.videos) != len(self.subs):
            raise MismatchError(videos=len(self.videos), subs=len(self.subs))

    def pair_set(self) -> PairSet:
        self.scan()
        self.validate()
        return PairSet(
            directory=self.directory,
            videos=tuple(self.videos),
            subs=tuple(self.subs),
        )


def pair(
    directory: Union[str, Path],
    video_token: str = DEFAULT_VIDEO_FORMAT,
    sub_token: str = DEFAULT_SUB_FORMAT,
) -> PairSet:
    """
    Builds the positional pairing of video and subtitle files in `directory`.

    Args:
        directory: Directory holding the video and subtitle files.
        video_token: Substring that marks a filename as a video.
        sub_token: Substring that marks a filename as a subtitle.

    Returns:
        The validated `PairSet`.

    Raises:
        MismatchError: If the video and subtitle counts differ.
        OSError: If the directory cannot be read.
    """
    return FilePairing(directory, video_token, sub_token).pair_set()

"""
Builds one `MuxTask` per (subtitle, video) pair.

A task carries everything one worker needs to produce its output file: the
filenames, the output path and the resolved language. The argument lists for
the external tools are derived from it on demand.

    mkvmerge -o <output> <video> --language 0:<code> --track-name 0:<name> <sub>
    ffs <video> -i <sub> -o <sub>
"""
from dataclasses import dataclass
from pathlib import Path
from typing import List, Union

from loguru import logger

from ..config import common
from ..config.common import OUTPUT_DIR_NAME
from ..domain.exceptions import OutputDirectoryError
from ..domain.languages import Language
from ..domain.pairing import PairSet


@dataclass(frozen=True)
class MuxTask:
    """
    The unit of work for one video/subtitle pair.

    Attributes:
        index: Position of the pair in the `PairSet`.
        sub_file: Subtitle filename, relative to `work_dir`.
        video_file: Video filename, relative to `work_dir`.
        output_path: Absolute path of the multiplexed file.
        language_code: ISO 639-2 code of the subtitle track.
        language_name: Track name written for the subtitle track.
        sync: Whether the subtitle is resynchronized in place before muxing.
        work_dir: Directory the external tools run in.
    """

    index: int
    sub_file: str
    video_file: str
    output_path: Path
    language_code: str
    language_name: str
    sync: bool
    work_dir: Path

    def mux_command(self) -> List[str]:
        return [
            common.MKVMERGE_PATH,
            "-o",
            str(self.output_path),
            self.video_file,
            "--language",
            f"0:{self.language_code}",
            "--track-name",
            f"0:{self.language_name}",
            self.sub_file,
        ]

    def sync_command(self) -> List[str]:
        return [
            common.FFS_PATH,
            self.video_file,
            "-i",
            self.sub_file,
            "-o",
            self.sub_file,
        ]


def output_dir_for(directory: Union[str, Path]) -> Path:
    return Path(directory).resolve() / OUTPUT_DIR_NAME


def create_output_dir(directory: Union[str, Path]) -> Path:
    """
    Creates `<directory>/output` if it does not exist yet.

    Raises:
        OutputDirectoryError: For any failure other than the folder already
                              existing. It is an `OSError` subclass.
    """
    output_dir = output_dir_for(directory)
    try:
        output_dir.mkdir(exist_ok=True)
    except OSError as e:
        raise OutputDirectoryError(e.errno, f"Could not create output folder: {e.strerror}", str(output_dir)) from e
    logger.debug(f"Output directory ready: {output_dir}")
    return output_dir


def build_tasks(pair_set: PairSet, language_code: str, sync_enabled: bool = False) -> List[MuxTask]:
    """
    Creates the tasks for every pair of `pair_set`.

    The language is resolved before anything else, so an unsupported code
    fails the whole batch without producing a single task.

    Raises:
        LangError: If `language_code` is not supported.
    """
    language = Language.from_code(language_code)
    output_dir = output_dir_for(pair_set.directory)

    tasks = [
        MuxTask(
            index=index,
            sub_file=sub,
            video_file=video,
            output_path=output_dir / video,
            language_code=language.code,
            language_name=language.display_name,
            sync=sync_enabled,
            work_dir=Path(pair_set.directory),
        )
        for index, (sub, video) in enumerate(pair_set.pairs)
    ]
    logger.debug(f"Built {len(tasks)} task(s) for language {language.code} ({language.display_name}), sync={sync_enabled}")
    return tasks

"""
Interactive confirmation of a proposed pairing.

The operator sees every (subtitle, video) pair and answers a single Y/n
prompt. Any answer containing a lowercase "n" cancels; everything else,
including an empty line or end of input, approves.
"""
import sys
from typing import Optional, TextIO

from loguru import logger

from ..domain.exceptions import ExitError
from ..domain.pairing import PairSet

PAIRS_HEADER = "Joining sub files to these video files."
CONFIRM_PROMPT = "Are these pairs correct? (Y/n): "


def render_pairs(pair_set: PairSet) -> str:
    lines = [PAIRS_HEADER]
    lines.extend(f"{sub}\t{video}" for sub, video in pair_set.pairs)
    return "\n".join(lines)


def is_rejection(answer: str) -> bool:
    return "n" in answer


def confirm(pair_set: PairSet, input_stream: Optional[TextIO] = None, output_stream: Optional[TextIO] = None):
    """
    Shows the pairing and blocks until the operator answers.

    Args:
        pair_set: The pairing to review.
        input_stream: Where the answer is read from. Defaults to stdin.
        output_stream: Where the preview and prompt go. Defaults to stdout.

    Raises:
        ExitError: If the operator rejects the pairing.
    """
    input_stream = input_stream or sys.stdin
    output_stream = output_stream or sys.stdout

    print(render_pairs(pair_set), file=output_stream)
    print(CONFIRM_PROMPT, file=output_stream, flush=True)

    answer = input_stream.readline()
    if is_rejection(answer):
        logger.info("Pairing rejected by user.")
        raise ExitError()
    logger.debug(f"Pairing approved (answer: {answer.strip()!r}).")

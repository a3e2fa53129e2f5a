"""
Console shell
-----

Reads two coordinates from stdin, one character at a time (ex. 'a1h8', or 'a1' and 'h8' on separate lines),
and prints the number of moves and the route of the knight.
"""

import logging
import sys
from typing import Optional, TextIO

from src.api.models import PathResponse
from src.core.config import PROMPT
from src.core.exceptions import InvalidCoordinateError, KnightPathError
from src.core.logging_setup import configure_logging
from src.services.path_service import KnightPathService

_LOGGER = logging.getLogger(__name__)

# Line endings typed between (or before) the coordinates. Windows terminals add the '\r'.
NOISE_CHARACTERS = "\r\n"


def read_significant_char(stream: TextIO) -> str:
    """Next character that is not a line ending."""
    while True:
        try:
            character = stream.read(1)
        except UnicodeDecodeError as error:
            raise InvalidCoordinateError(
                f"Input is not valid text ({error.encoding}): cannot read a coordinate from it."
            ) from error
        if character == "":
            raise InvalidCoordinateError("Input ended before two coordinates were read.")
        if character in NOISE_CHARACTERS:
            continue
        return character


def read_coordinate(stream: TextIO) -> str:
    return read_significant_char(stream) + read_significant_char(stream)


def format_response(response: PathResponse) -> str:
    return f"Shortest path:\n\tMoves: {response.moves}\n\tPath: {response.notation}"


def run(stdin: TextIO, stdout: TextIO, stderr: TextIO) -> int:
    """One query: prompt, read, search, print. Returns the process exit code."""
    stdout.write(PROMPT)
    stdout.flush()

    service = KnightPathService()
    try:
        start = read_coordinate(stdin)
        end = read_coordinate(stdin)
        response = service.find_shortest_path_between(start, end)
    except KnightPathError as error:
        _LOGGER.debug("Query failed", exc_info=True)
        stdout.write("\n")
        stderr.write(f"Error: {error}\n")
        return 1

    stdout.write(format_response(response) + "\n")
    return 0


def main(
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> int:
    configure_logging()
    return run(stdin or sys.stdin, stdout or sys.stdout, stderr or sys.stderr)


if __name__ == "__main__":
    sys.exit(main())

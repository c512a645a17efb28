"""
Incremental line splitting for streamed text
"""
from typing import List


class LineBuffer:
    """
    Collects text chunks of any size and hands back complete lines.
    A partial line at the end of a chunk is held until the rest arrives.
    """

    __slots__ = ("_buffer",)

    def __init__(self) -> None:
        self._buffer = ""

    @property
    def pending(self) -> str:
        """
        Text received since the last line feed
        """
        return self._buffer

    def feed(self, chunk: str) -> List[str]:
        """
        Add a chunk to the buffer and pull out every finished line
        :param chunk: Next piece of the stream
        :return: Complete lines, without their terminators
        """
        self._buffer += chunk
        if "\n" not in chunk:
            return []

        *lines, self._buffer = self._buffer.split("\n")
        return [_strip_carriage_return(line) for line in lines]

    def close(self) -> List[str]:
        """
        Signal end of stream, flushing an unterminated final line
        :return: The final line, if there was one
        """
        remainder, self._buffer = self._buffer, ""
        remainder = _strip_carriage_return(remainder)
        return [remainder] if remainder else []


def _strip_carriage_return(line: str) -> str:
    return line[:-1] if line.endswith("\r") else line

"""
Percentage-complete reporting for long reads
"""
import logging

LOGGER = logging.getLogger(__name__)


class ProgressReporter:
    """
    Tracks bytes consumed against an expected total and reports
    a percentage that only ever moves forward
    """

    label: str
    total_bytes: int
    bytes_read: int
    percent: float

    def __init__(self, total_bytes: int, label: str = "Progress") -> None:
        self.total_bytes = total_bytes
        self.label = label
        self.bytes_read = 0
        self.percent = 0.0
        self._next_milestone = 10

    def update(self, bytes_read: int) -> float:
        """
        Record another chunk worth of bytes
        :param bytes_read: Bytes consumed since the last update
        :return: Percent complete, two decimals
        """
        self.bytes_read += bytes_read
        if self.total_bytes > 0:
            computed = round(min(100.0, self.bytes_read / self.total_bytes * 100), 2)
            self.percent = max(self.percent, computed)

        LOGGER.debug(f"{self.label}:\t {self.percent:.2f}%")
        while self.percent >= self._next_milestone and self._next_milestone < 100:
            LOGGER.info(f"{self.label}:\t {self._next_milestone}%")
            self._next_milestone += 10

        return self.percent

    def finish(self) -> float:
        """
        Mark the read as done
        :return: Always 100.0
        """
        self.percent = 100.0
        LOGGER.info(f"{self.label}:\t {self.percent:.2f}%")
        return self.percent

from typing import Protocol


class RandomBytePort(Protocol):
    def random_byte(self) -> int:
        """Return a cryptographically secure integer in [0, 255]."""
        ...


class SleepPort(Protocol):
    def sleep(self, seconds: float) -> None:
        """Block the calling thread."""
        ...

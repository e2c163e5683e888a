from typing import Protocol


class ResponsePort(Protocol):
    """
    Response-like object supplied by the host framework.

    `status` is the full status line ("404 Not Found"); `status_code` the
    numeric code. Errors raised by an implementation propagate unchanged.
    """

    status: str
    status_code: int

    def add_header(self, name: str, value: str) -> None:
        """Add a response header."""
        ...

    def write(self, text: str) -> None:
        """Append text to the response body."""
        ...

    def end(self) -> None:
        """Finalize the response; nothing more may be written."""
        ...

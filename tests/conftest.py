from __future__ import annotations

import pytest


class RecordingResponse:
    """ResponsePort fake that records everything written to it."""

    def __init__(self) -> None:
        self.status = "200 OK"
        self.status_code = 200
        self.headers: list[tuple[str, str]] = []
        self.body = ""
        self.ended = False
        self.calls: list[str] = []

    def add_header(self, name: str, value: str) -> None:
        self.calls.append("add_header")
        self.headers.append((name, value))

    def write(self, text: str) -> None:
        self.calls.append("write")
        self.body += text

    def end(self) -> None:
        self.calls.append("end")
        self.ended = True

    def header(self, name: str) -> str | None:
        for key, value in self.headers:
            if key.lower() == name.lower():
                return value
        return None


class FakeSleeper:
    """Records requested sleeps instead of blocking."""

    def __init__(self) -> None:
        self.sleeps: list[float] = []

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)


class FixedRandomSource:
    def __init__(self, value: int) -> None:
        self.value = value

    def random_byte(self) -> int:
        return self.value


@pytest.fixture
def response() -> RecordingResponse:
    return RecordingResponse()


@pytest.fixture
def sleeper() -> FakeSleeper:
    return FakeSleeper()


@pytest.fixture
def random_source() -> FixedRandomSource:
    return FixedRandomSource(200)

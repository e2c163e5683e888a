import secrets
import time


class SecretsRandomSource:
    """Random bytes from the OS CSPRNG."""

    def random_byte(self) -> int:
        return secrets.token_bytes(1)[0]


class SystemSleeper:
    def sleep(self, seconds: float) -> None:
        time.sleep(seconds)

from webstatus.ports.entropy import RandomBytePort, SleepPort
from webstatus.ports.response import ResponsePort

__all__ = ["RandomBytePort", "ResponsePort", "SleepPort"]

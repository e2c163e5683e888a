from enum import Enum


class ResponseComplete(str, Enum):
    """Returned once a response has been finalized.

    Handlers should stop processing the request when they receive it.
    """

    COMPLETE = "complete"


RESPONSE_COMPLETE = ResponseComplete.COMPLETE

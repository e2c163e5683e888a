from webstatus.api.deps import get_http_status, get_rules
from webstatus.api.http_status import HttpStatus

__all__ = ["HttpStatus", "get_http_status", "get_rules"]

"""
webstatus - HTTP response-status helpers for web application servers.

Redirect resolution (301/303) and error statuses (400/404/410/500/502)
applied to a host framework's response object through ports.
"""

__version__ = "0.1.0"

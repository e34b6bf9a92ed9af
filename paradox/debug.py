##############################################################################
# Copyright (c) Paradox Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Paradox.
##############################################################################

"""
Tracing support for the traffic between Paradox and the ArangoDB server.

The `Debug` object is handed to every toolbox and forwarded into connection
construction. When it is enabled, each request sent to the server and each
response received from it is reported through the `paradox.debug` logger.
"""

import logging
from typing import Any, Dict


REDACTED = "********"
SENSITIVE_HEADERS = ("authorization",)


class Debug:
    """
    Tracing collaborator for server traffic.

    Attributes:
        enabled (bool): Whether tracing is active.
        logger (logging.Logger): The logger that receives the trace lines.

    Methods:
        enable: Turn tracing on.
        disable: Turn tracing off.
        trace: Report a single `send` or `receive` event.
    """

    def __init__(self, enabled: bool = False, logger: logging.Logger = None):
        """
        Initialize the tracer.

        Args:
            enabled: Whether tracing starts out active.
            logger: The logger to report to. Defaults to `paradox.debug`.
        """
        self.enabled = bool(enabled)
        self.logger = logger or logging.getLogger("paradox.debug")

    def __bool__(self) -> bool:
        return self.enabled

    def __repr__(self) -> str:
        return f"Debug(enabled={self.enabled})"

    def enable(self):
        """Turn tracing on."""
        self.enabled = True

    def disable(self):
        """Turn tracing off."""
        self.enabled = False

    def trace(self, direction: str, data: Dict[str, Any]):
        """
        Report a request or a response.

        Args:
            direction: Either `send` or `receive`.
            data: The event payload. Requests carry `method`, `url`, `headers`
                and `body`; responses carry `status`, `headers`, `body` and
                `elapsed`.
        """
        if not self.enabled:
            return

        headers = redact_headers(data.get("headers") or {})
        if direction == "send":
            self.logger.debug(f"SEND {data.get('method', '').upper()} {data.get('url')}")
        else:
            self.logger.debug(f"RECEIVE {data.get('status')} ({data.get('elapsed', 0.0):.3f}s)")
        for key, value in headers.items():
            self.logger.debug(f"  {key}: {value}")
        if data.get("body"):
            self.logger.debug(f"  body: {data['body']}")


def redact_headers(headers: Dict[str, str]) -> Dict[str, str]:
    """
    Hide the values of credential-bearing headers.

    Args:
        headers: The headers of a request or response.

    Returns:
        A copy of `headers` with sensitive values replaced.
    """
    return {key: REDACTED if key.lower() in SENSITIVE_HEADERS else value for key, value in headers.items()}

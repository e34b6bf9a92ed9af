##############################################################################
# Copyright (c) Paradox Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Paradox.
##############################################################################

"""
Connection objects for the ArangoDB server.

This module defines `ConnectionOptions`, the only place toolbox configuration
is translated into driver settings, and `Connection`, which owns the
python-arango client and the database handle every handler works on.
"""

import logging
import time
from dataclasses import dataclass
from typing import Any, Optional

from arango import ArangoClient
from arango.database import StandardDatabase
from arango.http import DefaultHTTPClient
from arango.response import Response

from paradox import DEFAULT_DATABASE


LOG = logging.getLogger(__name__)

AUTH_TYPE_BASIC = "Basic"
SUPPORTED_AUTH_TYPES = (AUTH_TYPE_BASIC,)

# Endpoint schemes understood by Paradox mapped to the scheme python-arango expects
ENDPOINT_SCHEMES = {
    "tcp": "http",
    "ssl": "https",
    "http": "http",
    "https": "https",
}


@dataclass
class ConnectionOptions:
    """
    Settings used to build a `Connection`.

    Attributes:
        endpoint: The server address, e.g. `tcp://localhost:8529`.
        auth_type: The authentication scheme. Only `Basic` is supported.
        auth_user: The username used for basic authentication.
        auth_passwd: The password used for basic authentication.
        trace: The tracing collaborator, or a falsy value to disable tracing.
        enhanced_trace: Whether traces carry structured payloads.
        database: The name of the database to work on.
    """

    endpoint: str
    auth_type: str = AUTH_TYPE_BASIC
    auth_user: Optional[str] = None
    auth_passwd: Optional[str] = None
    trace: Any = None
    enhanced_trace: bool = True
    database: str = DEFAULT_DATABASE

    def validate(self):
        """
        Check that the driver can work with these options.

        Raises:
            ValueError: If the endpoint or the authentication type is not supported.
        """
        if not isinstance(self.endpoint, str) or "://" not in self.endpoint:
            raise ValueError(f"Invalid endpoint '{self.endpoint}'. Expected something like 'tcp://localhost:8529'.")
        scheme = self.endpoint.split("://", 1)[0].lower()
        if scheme not in ENDPOINT_SCHEMES:
            raise ValueError(
                f"Unsupported endpoint scheme '{scheme}'. Supported schemes: {', '.join(ENDPOINT_SCHEMES)}."
            )
        if self.auth_type not in SUPPORTED_AUTH_TYPES:
            raise ValueError(f"Unsupported authentication type '{self.auth_type}'.")
        if not self.database:
            raise ValueError("A database name is required.")

    @property
    def hosts(self) -> str:
        """
        The endpoint rewritten for python-arango (`tcp://` becomes `http://`, `ssl://` becomes `https://`).
        """
        scheme, address = self.endpoint.split("://", 1)
        return f"{ENDPOINT_SCHEMES[scheme.lower()]}://{address.rstrip('/')}"


class TracingHTTPClient(DefaultHTTPClient):
    """
    HTTP client that reports every request and response to a tracer.

    Attributes:
        tracer: An object with a `trace(direction, data)` method.
        enhanced: Whether to send structured payloads (headers included).
    """

    def __init__(self, tracer: Any, enhanced: bool = True, **kwargs):
        super().__init__(**kwargs)
        self.tracer = tracer
        self.enhanced = enhanced

    def send_request(  # pylint: disable=too-many-arguments,too-many-positional-arguments
        self, session, method, url, headers=None, params=None, data=None, auth=None
    ) -> Response:
        """
        Send a request and trace both directions of the exchange.
        """
        request_data = {"method": method, "url": url, "body": data}
        if self.enhanced:
            request_data["headers"] = dict(headers or {})
            request_data["params"] = dict(params or {})
        self.tracer.trace("send", request_data)

        start = time.perf_counter()
        response = super().send_request(session, method, url, headers=headers, params=params, data=data, auth=auth)

        response_data = {
            "status": response.status_code,
            "body": response.raw_body,
            "elapsed": time.perf_counter() - start,
        }
        if self.enhanced:
            response_data["headers"] = dict(response.headers or {})
        self.tracer.trace("receive", response_data)
        return response


class Connection:
    """
    A connection to one database on an ArangoDB server.

    Building a connection does not contact the server; the first request made
    through one of the handlers does.

    Attributes:
        options (ConnectionOptions): The options the connection was built from.
        client (ArangoClient): The python-arango client.
        database (StandardDatabase): The handle on the configured database.

    Methods:
        get_database_name: The name of the database this connection works on.
        system_database: A handle on the `_system` database with the same credentials.
        close: Close the HTTP sessions held by the client.
    """

    def __init__(self, options: ConnectionOptions):
        """
        Build the client and database handle.

        Args:
            options: The connection options.

        Raises:
            ValueError: If the options are rejected.
        """
        options.validate()
        self.options: ConnectionOptions = options

        http_client = None
        if options.trace:
            http_client = TracingHTTPClient(options.trace, enhanced=options.enhanced_trace)

        self.client: ArangoClient = ArangoClient(hosts=options.hosts, http_client=http_client)
        self.database: StandardDatabase = self._open(options.database)
        LOG.debug(f"Built connection to database '{options.database}' at {options.hosts}.")

    def _open(self, name: str) -> StandardDatabase:
        """
        Open a handle on a database with the configured credentials.

        Args:
            name: The database name.

        Returns:
            The python-arango database handle.
        """
        credentials = {}
        if self.options.auth_user is not None:
            credentials["username"] = self.options.auth_user
        if self.options.auth_passwd is not None:
            credentials["password"] = self.options.auth_passwd
        return self.client.db(name, auth_method="basic", verify=False, **credentials)

    def get_database_name(self) -> str:
        """
        Get the name of the database this connection works on.

        Returns:
            The database name.
        """
        return self.options.database

    def system_database(self) -> StandardDatabase:
        """
        Open a handle on the `_system` database, needed for database administration.

        Returns:
            The python-arango database handle for `_system`.
        """
        if self.options.database == DEFAULT_DATABASE:
            return self.database
        return self._open(DEFAULT_DATABASE)

    def close(self):
        """Close the HTTP sessions held by the client."""
        self.client.close()

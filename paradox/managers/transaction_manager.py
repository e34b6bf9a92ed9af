##############################################################################
# Copyright (c) Paradox Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Paradox.
##############################################################################

"""
`TransactionManager` module for running server-side transactions.

The action is a JavaScript function executed by the server in a single
request. Paradox passes it through as-is.
"""

import logging
from typing import Any, Dict, Iterable

from paradox.exceptions import TransactionManagerError
from paradox.managers.component import ToolboxComponent


LOG = logging.getLogger(__name__)


class TransactionManager(ToolboxComponent):
    """
    Run transactions on the server.

    Methods:
        execute: Run a JavaScript action inside a transaction.
    """

    error_class = TransactionManagerError

    def execute(  # pylint: disable=too-many-arguments,too-many-positional-arguments
        self,
        action: str,
        read: Iterable[str] = None,
        write: Iterable[str] = None,
        params: Dict[str, Any] = None,
        wait_for_sync: bool = None,
        lock_timeout: int = None,
    ) -> Any:
        """
        Run a JavaScript action inside a transaction.

        Args:
            action: The JavaScript function, e.g. `function (params) { ... }`.
            read: Collections the action reads.
            write: Collections the action writes.
            params: Parameters handed to the action.
            wait_for_sync: Whether to wait for the transaction to be synced to disk.
            lock_timeout: Seconds to wait for collection locks.

        Returns:
            Whatever the action returns.

        Raises:
            TransactionManagerError: If the server aborts the transaction.
        """
        if not action:
            raise TransactionManagerError("A transaction needs an action.")

        read = list(read or [])
        write = list(write or [])
        transaction = self.toolbox.get_transaction_object()
        transaction.set_action(action)
        transaction.set_read_collections(read)
        transaction.set_write_collections(write)
        transaction.set_params(params or {})
        transaction.wait_for_sync = wait_for_sync
        transaction.lock_timeout = lock_timeout

        LOG.debug(f"Executing transaction (read={read}, write={write}).")
        with self.driver_errors("execute a transaction"):
            return transaction.execute()

"""
XenAPI Connection

Thin capability wrapper around an already authenticated XenAPI session.

Provides:
- A single call(xenapi_class, method, *args) entry point used by all descriptors
- Debug logging of every remote call and of failures

Does NOT provide (handled by the caller):
- Login / logout and session renewal
- Retries, backoff or timeouts
- Locking; the session must not be shared across concurrent call chains
"""

import logging
import xmlrpc.client
from typing import Any

import XenAPI

from .errors import describe_failure

logger = logging.getLogger(__name__)


class Connection:
    """
    Issues typed XenAPI calls grouped by object class.

    Example:
        session = XenAPI.Session("https://xenserver.local")
        session.xenapi.login_with_password("root", password)

        conn = Connection(session)
        vm = VMDescriptor(name="web-01").load(conn)
    """

    def __init__(self, session):
        """
        Initialize the connection.

        Args:
            session: Logged-in XenAPI.Session, or any object exposing
                the same `xenapi` proxy
        """
        self.session = session

    @property
    def xenapi(self):
        return self.session.xenapi

    def call(self, xenapi_class: str, method: str, *args) -> Any:
        """
        Invoke `method` on XenAPI class `xenapi_class`.

        Args:
            xenapi_class: XenAPI class name (e.g. "VM", "network")
            method: Method name (e.g. "get_record")
            *args: Call arguments, excluding the session reference

        Returns:
            The decoded XenAPI result

        Raises:
            XenAPI.Failure: On API errors, unchanged
            OSError, xmlrpc.client.Error: On transport errors, unchanged
        """
        name = f"{xenapi_class}.{method}"
        logger.debug(f"XenAPI call {name}{tuple(args)!r}")

        target = getattr(getattr(self.xenapi, xenapi_class), method)
        try:
            return target(*args)
        except XenAPI.Failure as e:
            logger.debug(f"XenAPI call {name} failed: {describe_failure(e)}")
            raise
        except (OSError, xmlrpc.client.Error) as e:
            logger.debug(f"XenAPI call {name} transport error: {describe_failure(e)}")
            raise

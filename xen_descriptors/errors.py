"""
XenAPI Descriptor Errors

Local error types raised while resolving descriptors, plus a mapping of
well-known XenAPI failure codes to readable messages for log output.

Remote failures themselves (XenAPI.Failure, transport errors) are never
wrapped: they reach the caller exactly as the XenAPI library raised them.
"""

from typing import Any, Dict, List, Optional, Sequence, Tuple


class XenDescriptorError(Exception):
    """Base exception for descriptor operations"""

    def __init__(self, message: str, error_code: Optional[str] = None):
        self.message = message
        self.error_code = error_code
        super().__init__(self.message)


class MissingIdentifierError(XenDescriptorError):
    """Raised when resolution is attempted without any usable identifier"""

    def __init__(self, kind: str, fields: Sequence[str]):
        quoted = [f'"{field}"' for field in fields]
        if len(quoted) > 1:
            message = f"Either {' or '.join(quoted)} should be specified for {kind}!"
        else:
            message = f"{quoted[0]} should be specified for {kind}!"
        super().__init__(message, error_code="MISSING_IDENTIFIER")
        self.kind = kind
        self.fields = list(fields)


class NotFoundError(XenDescriptorError):
    """Raised when a name lookup returns no references"""

    def __init__(self, kind: str, name: str):
        message = f'{kind} "{name}" not found!'
        super().__init__(message, error_code="NOT_FOUND")
        self.kind = kind
        self.name = name


# Mapping of XenAPI failure codes to readable messages
XENAPI_ERROR_MESSAGES: Dict[str, Dict[str, Any]] = {
    'HANDLE_INVALID': {
        'title': 'Invalid Reference',
        'message': 'The object reference is not valid. The object may have been destroyed.',
    },
    'UUID_INVALID': {
        'title': 'Unknown UUID',
        'message': 'No object with the given UUID exists.',
    },
    'SESSION_INVALID': {
        'title': 'Session Expired',
        'message': 'The XenAPI session is no longer valid. Log in again.',
    },
    'SESSION_AUTHENTICATION_FAILED': {
        'title': 'Authentication Failed',
        'message': 'Invalid credentials for the XenAPI connection.',
    },
    'HOST_IS_SLAVE': {
        'title': 'Pool Member',
        'message': 'The host is a pool member; connect to the pool master instead.',
    },
    'VM_BAD_POWER_STATE': {
        'title': 'Bad Power State',
        'message': 'The VM is in the wrong power state for this operation.',
    },
    'MEMORY_CONSTRAINT_VIOLATION': {
        'title': 'Memory Constraint Violation',
        'message': 'Memory limits must satisfy static_min <= dynamic_min <= dynamic_max <= static_max.',
    },
    'LICENCE_RESTRICTION': {
        'title': 'License Issue',
        'message': 'The operation requires a license the host does not have.',
    },
    'OPERATION_NOT_ALLOWED': {
        'title': 'Operation Not Allowed',
        'message': 'The operation is not permitted in the current state.',
    },
    'RBAC_PERMISSION_DENIED': {
        'title': 'Permission Denied',
        'message': 'Insufficient permissions to perform this operation.',
    },
    'VDI_IN_USE': {
        'title': 'Disk In Use',
        'message': 'The virtual disk is in use by another operation.',
    },
}


def failure_details(error: Exception) -> List[str]:
    """
    Extract the detail list from a XenAPI failure.

    XenAPI.Failure keeps [error_code, param, ...] in its `details`
    attribute; anything else yields an empty list.
    """
    details = getattr(error, 'details', None)
    if isinstance(details, (list, tuple)):
        return [str(d) for d in details]
    return []


def parse_xenapi_error(error: Exception) -> Tuple[str, Optional[Dict[str, Any]]]:
    """
    Parse a XenAPI exception and return a readable message.

    Returns:
        Tuple of (friendly_message, error_info_dict or None)
    """
    details = failure_details(error)
    if details:
        error_code = details[0]
        info = XENAPI_ERROR_MESSAGES.get(error_code)
        if info:
            return info['message'], {
                'title': info['title'],
                'error_code': error_code,
                'params': details[1:],
            }
        return ' '.join(details), None

    return str(error), None


def describe_failure(error: Exception) -> str:
    """
    Format a remote call failure for log output.
    """
    friendly_msg, info = parse_xenapi_error(error)

    if info:
        params = f" ({', '.join(info['params'])})" if info['params'] else ""
        return f"{info['title']}: {friendly_msg}{params}"

    return friendly_msg

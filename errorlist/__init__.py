from .__about__ import __version__  # noqa: F401
from ._error_list import ErrorList
from ._coerce import from_fast, from_error
from ._append import append, append_call, ErrorSlot, deferred_append


__all__ = [
    'ErrorList',
    'from_fast', 'from_error',
    'append',
    'ErrorSlot', 'append_call', 'deferred_append',
]

import logging
from typing import List, Optional

from ._error_list import ErrorList, _is_error


logger = logging.getLogger(__name__)

#: attributes that foreign aggregates use to expose their errors
#: - ``exceptions`` is the ``ExceptionGroup`` protocol
#: - ``children`` is common for hand-written aggregates
CHILDREN_ATTRIBUTES = ('exceptions', 'children')


def from_fast(error: Optional[BaseException]) -> Optional[ErrorList]:
    """
    Provide ``error`` as an :py:exc:`~.ErrorList` without inspecting its shape

    This is like :py:func:`~.from_error` but only recognises actual
    :py:exc:`~.ErrorList` instances; any other aggregate of errors
    is wrapped as a single error. If ``error`` is :py:data:`None`,
    so is the result.
    """
    if error is None:
        return None
    if isinstance(error, ErrorList):
        return error
    return ErrorList(error)


def from_error(error: Optional[BaseException]) -> Optional[ErrorList]:
    """
    Provide ``error`` as an :py:exc:`~.ErrorList` of its individual errors

    :param error: the error to split up, or :py:data:`None`
    :return: the individual errors, or :py:data:`None` if ``error`` is

    An :py:exc:`~.ErrorList` is returned unaltered. Other aggregates of errors,
    such as an :py:exc:`ExceptionGroup` or any exception iterating over
    exceptions, are converted to a new :py:exc:`~.ErrorList` of their content.
    Everything else is wrapped as the only element of a new
    :py:exc:`~.ErrorList`.

    .. code:: python3

        for child in from_error(error):
            print('Error:', child, file=sys.stderr)
    """
    if error is None:
        return None
    if isinstance(error, ErrorList):
        return error
    children = _from_foreign(error)
    if children is not None:
        return ErrorList(*children)
    return ErrorList(error)


def _from_foreign(error: BaseException) -> Optional[List[Optional[BaseException]]]:
    """
    Get the children of an aggregate that is not an ``ErrorList``, if possible

    Candidates are tried in the order of :py:data:`CHILDREN_ATTRIBUTES`,
    then ``error`` itself if its type is iterable. The first candidate
    that provides only errors and ``None`` is used.
    """
    # There is no telling what a foreign ``__iter__`` or property does.
    # Any failure counts as the candidate not being an aggregate.
    for candidate in _candidates(error):
        try:
            children = list(candidate)
        except Exception as err:
            logger.debug('%r is no aggregate of errors: %s', error, err)
            continue
        if all(map(_is_error, children)):
            return children
        logger.debug('%r does not only contain errors', error)
    return None


def _candidates(error: BaseException):
    for attribute in CHILDREN_ATTRIBUTES:
        try:
            candidate = getattr(error, attribute, None)
        except Exception as err:
            logger.debug('%r failed to provide %r: %s', error, attribute, err)
            continue
        if candidate is not None:
            yield candidate
    if hasattr(type(error), '__iter__'):
        yield error

import logging
from itertools import chain
from typing import Callable, Optional

from ._error_list import ErrorList
from ._coerce import _from_foreign, from_fast


logger = logging.getLogger(__name__)


def append(*errors: Optional[BaseException]) -> Optional[BaseException]:
    """
    Combine several ``errors`` to one, dropping any :py:data:`None`

    :param errors: individual errors, :py:exc:`~.ErrorList`\\ s or :py:data:`None`
    :return: the combined error or :py:data:`None`

    If there is no error, the result is :py:data:`None`.
    If there is exactly one error, it is returned unchanged.
    Otherwise, a new :py:exc:`~.ErrorList` of all errors is returned.
    Any :py:exc:`~.ErrorList` is flattened into the result,
    but not recursively - a nested :py:exc:`~.ErrorList` stays nested.

    .. code:: python3

        >>> error = append(KeyError('one'), None, ErrorList(KeyError('two')))
        >>> error
        ErrorList(KeyError('one'), KeyError('two'))

    Other aggregates of errors, such as :py:exc:`ExceptionGroup`,
    are only flattened when they are the first error.
    None of the inputs is modified.
    """
    # common case of ``append(error, cleanup())`` without any errors
    if len(errors) == 2 and errors[0] is None and errors[1] is None:
        return None
    candidates = (error for error in errors if error is not None)
    first = next(candidates, None)
    if first is None:
        return None
    second = next(candidates, None)
    if second is None:
        return first
    if isinstance(first, ErrorList):
        accumulator = ErrorList(*first.children)
    else:
        children = _from_foreign(first)
        accumulator = ErrorList(first) if children is None else ErrorList(*children)
    for error in chain((second,), candidates):
        if isinstance(error, ErrorList):
            accumulator.extend(error.children)
        else:
            accumulator.append(error)
    return accumulator


class ErrorSlot:
    """
    Storage for the error of an operation that is still going on

    .. code:: python3

        slot = ErrorSlot()
        try:
            write(stream)
        except OSError as err:
            slot.error = err
        append_call(slot, stream.close)
        return slot.error
    """
    __slots__ = ('error',)

    def __init__(self, error: Optional[BaseException] = None):
        self.error = error

    def __repr__(self):
        return f'{self.__class__.__name__}({self.error!r})'


def append_call(
    slot: ErrorSlot, call: Callable[[], Optional[BaseException]]
) -> None:
    """
    Call ``call`` and :py:func:`~.append` its error to the error in ``slot``

    The error of ``call`` is any :py:exc:`Exception` it raises, or an
    exception it returns. Signals such as :py:exc:`KeyboardInterrupt`
    are not captured and propagate as usual.
    """
    slot.error = append(slot.error, _outcome(call))


def _outcome(call: Callable[[], Optional[BaseException]]) -> Optional[BaseException]:
    try:
        result = call()
    except Exception as err:
        logger.debug('deferred call %r failed: %s', call, err)
        return err
    return result if isinstance(result, BaseException) else None


def _recorded(error: Optional[BaseException], candidate: Optional[BaseException]) -> bool:
    """Whether ``candidate`` is already part of ``error``"""
    if candidate is None or candidate is error:
        return True
    return any(child is candidate for child in from_fast(error) or ())


class deferred_append:
    r"""
    Context that calls ``call`` on exit and appends its error to the outcome

    :param call: cleanup to run on every exit of the context
    :param slot: storage for the combined error, a new one by default
    :param reraise: whether to raise the combined error on exit

    Entering the context provides the :py:class:`~.ErrorSlot` that collects
    the error of the block, if any, and then that of ``call``.
    By default, the combined error is raised when leaving the context:

    .. code:: python3

        def write_letters(stream):
            with deferred_append(stream.close):
                for letter in string.ascii_lowercase:
                    stream.write(letter)

    If writing fails with ``OSError('no writing!')`` and closing fails with
    ``OSError('no closing!')``, the context raises an :py:exc:`~.ErrorList` with
    message ``no writing! and no closing!``. If only one of them fails,
    that error is raised unchanged. An error of the block that is already
    stored in the slot, such as one raised by a nested context sharing
    the slot, is not added a second time.

    With ``reraise=False``, all errors are only stored in the slot and
    the error of the block is suppressed:

    .. code:: python3

        def write_letters(stream) -> Optional[BaseException]:
            with deferred_append(stream.close, reraise=False) as outcome:
                for letter in string.ascii_lowercase:
                    stream.write(letter)
            return outcome.error

    Exceptions that are not an :py:exc:`Exception`, such as
    :py:exc:`KeyboardInterrupt`, are never combined or suppressed;
    ``call`` is still run in this case.
    """
    __slots__ = 'call', 'slot', 'reraise'

    def __init__(
        self,
        call: Callable[[], Optional[BaseException]],
        slot: Optional[ErrorSlot] = None,
        reraise: bool = True,
    ):
        self.call = call
        self.slot = slot if slot is not None else ErrorSlot()
        self.reraise = reraise

    def __enter__(self) -> ErrorSlot:
        return self.slot

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_val is not None and not isinstance(exc_val, Exception):
            append_call(self.slot, self.call)
            return False
        # the block may raise what is already stored, e.g. from a nested context
        if not _recorded(self.slot.error, exc_val):
            self.slot.error = append(self.slot.error, exc_val)
        append_call(self.slot, self.call)
        error = self.slot.error
        if not self.reraise:
            return True
        if error is None or error is exc_val:
            return False
        raise error

from collections.abc import MutableSequence
from typing import Iterable, Iterator, List, Optional


class ErrorList(Exception, MutableSequence):
    """
    Exception made of an ordered sequence of other exceptions

    An :py:exc:`~.ErrorList` is both an :py:exc:`Exception` and a mutable
    sequence of its ``children``. It can be raised or returned wherever a
    single error is expected, while still allowing to inspect each error:

    .. code:: python3

        errors = ErrorList(KeyError('one'), IndexError('two'))
        print(errors)  # 'one' and 'two'
        for error in errors:
            print(type(error).__name__)

    The message joins the messages of all children as an English list:
    ``a``, ``a and b``, ``a, b, and c``. A child may be :py:data:`None`,
    which renders as an empty message.

    .. note::

        Equality is by identity, as for every other exception.
        Compare ``list(errors)`` to check the content.
        The ``args`` of the exception are the children passed on creation;
        use ``children`` for the current content.
    """
    #: Errors in the order they were observed
    children: List[Optional[BaseException]]

    def __init__(self, *children: Optional[BaseException]):
        assert all(map(_is_error, children)),\
            f'{self.__class__.__name__!r} may only contain exceptions or None,'\
            f' not {[child for child in children if not _is_error(child)]!r}'
        super().__init__(*children)
        self.children = list(children)

    # Sequence Interface
    def __getitem__(self, index):
        if isinstance(index, slice):
            return self.__class__(*self.children[index])
        return self.children[index]

    def __setitem__(self, index, value):
        if isinstance(index, slice):
            value = list(value)
            assert all(map(_is_error, value)), f'cannot store {value!r}'
        else:
            assert _is_error(value), f'cannot store {value!r}'
        self.children[index] = value

    def __delitem__(self, index):
        del self.children[index]

    def __len__(self) -> int:
        return len(self.children)

    def __iter__(self) -> Iterator[Optional[BaseException]]:
        return iter(self.children)

    def insert(self, index: int, value: Optional[BaseException]):
        assert _is_error(value), f'cannot store {value!r}'
        self.children.insert(index, value)

    def extend(self, values: Iterable[Optional[BaseException]]):
        values = list(values)
        assert all(map(_is_error, values)), f'cannot store {values!r}'
        self.children.extend(values)

    # Exception Interface
    def __str__(self):
        count = len(self.children)
        parts = []
        for index, child in enumerate(self.children):
            parts.append('' if child is None else str(child))
            remaining = count - index
            if remaining == 2:
                # Oxford comma only for more than two items
                parts.append(', and ' if count > 2 else ' and ')
            elif remaining > 2:
                parts.append(', ')
        return ''.join(parts)

    def __repr__(self):
        return f'{self.__class__.__name__}({", ".join(map(repr, self.children))})'

    def __reduce__(self):
        return self.__class__, tuple(self.children), self.__dict__


def _is_error(child) -> bool:
    return child is None or isinstance(child, BaseException)

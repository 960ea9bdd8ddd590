from typing import Callable, List, Optional, TypeVar


RT = TypeVar('RT')


def noop(*args, **kwargs):
    """Placeholder callable that does nothing for any input"""
    pass


class Other(Exception):
    """
    Aggregate of errors that is not related to ``ErrorList``

    Mimics how libraries define their own error aggregates,
    including a custom message format.
    """
    def __init__(self, *children: Optional[BaseException]):
        super().__init__(*children)
        self.items: List[Optional[BaseException]] = list(children)

    def __iter__(self):
        return iter(self.items)

    def __str__(self):
        return 'other: (%s)' % ', '.join(map(str, self.items))


class Grouped(Exception):
    """Aggregate of errors exposing them as ``children``, like ``MultiError``"""
    def __init__(self, *children: BaseException):
        super().__init__(*children)
        self.children = children

    def __str__(self):
        return ', '.join(repr(child) for child in self.children)


class Failing:
    """Callable that raises or returns ``error`` and counts its calls"""
    def __init__(self, error: Optional[BaseException] = None, raises=True):
        self.error = error
        self.raises = raises
        self.calls = 0

    def __call__(self):
        self.calls += 1
        if self.error is not None and self.raises:
            raise self.error
        return self.error


def assertion_mode(test_case: Callable[..., RT]) -> Callable[..., RT]:
    """
    Mark a test as using the optional assertion API only available in __debug__

    .. code:: python3

        @assertion_mode
        def test_do_assert(self):
            with pytest.raises(AssertionError):
                ErrorList('not an exception')

    :note: This is intended to protect *app-level* assertions.
           The ``assert`` statements of pytest are not affected by debug mode.
    """
    if __debug__:
        return test_case
    return noop

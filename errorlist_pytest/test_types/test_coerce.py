import logging
import sys

import pytest

from errorlist import ErrorList, append, from_fast, from_error

from errorlist_pytest.utility import Other, Grouped


e1, e2 = ValueError('one'), ValueError('two')


class Unreliable(Exception):
    """Error that fails when being inspected as an aggregate"""
    def __iter__(self):
        raise RuntimeError('cannot iterate me')


class Broken(Exception):
    """Error that fails when looking up its aggregated errors"""
    @property
    def exceptions(self):
        raise LookupError('no exceptions here')


class Mixed(Exception):
    """Error that iterates, but not over errors"""
    def __iter__(self):
        return iter([e1, 'two'])


class Counted(Exception):
    """Error with a count of ``exceptions`` and its errors as ``children``"""
    exceptions = 2

    def __init__(self, *children: BaseException):
        super().__init__(*children)
        self.children = children


class Listing(Exception):
    """Error with an ``exceptions`` method, iterating over its errors"""
    def exceptions(self):
        return list(self.args)

    def __iter__(self):
        return iter(self.args)


class TestFromFast:
    """Test ``from_fast`` which only knows ``ErrorList``"""
    def test_none(self):
        assert from_fast(None) is None

    def test_error_list(self):
        """``ErrorList``\\ s are passed through as-is"""
        errors = ErrorList(e1, e2)
        assert from_fast(errors) is errors
        empty = ErrorList()
        assert from_fast(empty) is empty

    def test_single(self):
        result = from_fast(e1)
        assert type(result) is ErrorList
        assert list(result) == [e1]
        assert str(result) == 'one'

    def test_foreign(self):
        """Foreign aggregates are treated as a single error"""
        other = Other(e1, e2)
        result = from_fast(other)
        assert list(result) == [other]
        assert str(result) == 'other: (one, two)'


class TestFromError:
    """Test ``from_error`` which also recognises foreign aggregates"""
    def test_none(self):
        assert from_error(None) is None

    def test_error_list(self):
        errors = ErrorList(e1, e2)
        assert from_error(errors) is errors

    def test_single(self):
        result = from_error(e1)
        assert list(result) == [e1]
        assert str(result) == 'one'

    def test_iterable(self):
        """Errors iterating over errors are converted"""
        other = Other(e1, e2)
        result = from_error(other)
        assert type(result) is ErrorList
        assert list(result) == [e1, e2]
        assert str(result) == 'one and two'
        # the foreign aggregate is copied, not shared
        result.append(e1)
        assert other.items == [e1, e2]

    def test_children(self):
        """Errors with ``children`` are converted"""
        result = from_error(Grouped(e1, e2))
        assert list(result) == [e1, e2]

    def test_foreign_content(self):
        """Converted aggregates keep ``None`` and empty content"""
        assert list(from_error(Other(e1, None))) == [e1, None]
        empty = from_error(Other())
        assert type(empty) is ErrorList
        assert len(empty) == 0

    @pytest.mark.skipif(sys.version_info < (3, 11), reason="requires ExceptionGroup")
    def test_exception_group(self):
        group = ExceptionGroup('group', [e1, e2])  # noqa: F821
        result = from_error(group)
        assert list(result) == [e1, e2]
        assert str(result) == 'one and two'

    def test_failed_inspection(self, caplog):
        """Errors failing inspection are wrapped as a single error"""
        with caplog.at_level(logging.DEBUG, logger='errorlist'):
            for error in (Unreliable('unreliable'), Broken('broken'), Mixed('mixed')):
                assert list(from_error(error)) == [error]
        assert 'cannot iterate me' in caplog.text
        assert 'no exceptions here' in caplog.text
        assert 'does not only contain errors' in caplog.text

    def test_next_candidate(self):
        """Unusable ``exceptions`` fall back to other ways of listing errors"""
        assert list(from_error(Counted(e1, e2))) == [e1, e2]
        assert list(from_error(Listing(e1, e2))) == [e1, e2]
        assert str(append(Counted(e1, e2), ValueError('three'))) == 'one, two, and three'

    def test_plain_silent(self, caplog):
        """Regular errors are not reported as failed inspection"""
        with caplog.at_level(logging.DEBUG, logger='errorlist'):
            assert str(append(ValueError('one'), ValueError('two'))) == 'one and two'
            assert list(append(e1, None, e2)) == [e1, e2]
            assert list(from_error(e1)) == [e1]
            assert list(from_error(OSError(2, 'missing')))[0].errno == 2
        assert caplog.records == []

    def test_matches_fast(self):
        """Regular errors and ``ErrorList``\\ s are converted like ``from_fast``"""
        errors = ErrorList(e1)
        assert from_error(errors) is from_fast(errors)
        for error in (e1, KeyError('three'), OSError(2, 'missing')):
            assert list(from_error(error)) == list(from_fast(error))

"""
=============================================
``errorlist`` -- Many Errors Where One Is Due
=============================================

``errorlist`` collects several independent errors into a single exception,
so that a cleanup failure does not shadow the failure it is cleaning up after.
The individual errors can be recovered at any time.

.. code:: python3

   >>> from errorlist import append, from_error
   >>>
   >>> error = append(ValueError('no writing!'), None, OSError('no closing!'))
   >>> print(error)
   no writing! and no closing!
   >>> for child in from_error(error):
   ...     print('Error:', child)
   ...
   Error: no writing!
   Error: no closing!
"""
__title__ = 'errorlist'
__summary__ = 'Aggregate several errors into one exception'

__version__ = '0.1.0'
__author__ = 'The errorlist authors'
__copyright__ = '2026 %s' % __author__
__keywords__ = 'error exception aggregate multiple cleanup'

import time

from errorlist import ErrorList, append, from_error


def collect(rounds: int):
    error = None
    for index in range(rounds):
        error = append(error, None if index % 3 else ValueError('round %d' % index))
    return error


def perform(rounds: int = 10000):
    start = time.perf_counter()
    error = collect(rounds)
    duration = time.perf_counter() - start
    print('collected %d errors in %.3fs' % (len(from_error(error)), duration))
    print('ops/s: %.3f' % (rounds / duration))
    assert isinstance(error, ErrorList)


if __name__ == '__main__':
    perform()

import logging
from concurrent.futures import ThreadPoolExecutor

logger = logging.getLogger(__name__)


def forEach(items, function, parallel=False, maxWorkers=None):
    """
    Call **function** on each of **items** and return the results
    in the order of **items**.

    When **parallel** is True the calls are spread over a thread
    pool with at most **maxWorkers** threads. Each result is stored
    at the index of its item, so the output is the same as for the
    sequential run. If any call fails, the error of the failing
    item with the lowest index is raised once all calls finished.

    >>> forEach([1, 2, 3], lambda i: i * 2)
    [2, 4, 6]
    >>> forEach(range(50), lambda i: i * 2, parallel=True) == list(range(0, 100, 2))
    True
    """
    items = list(items)
    if not parallel or len(items) < 2:
        return [function(item) for item in items]
    results = [None] * len(items)
    errors = [None] * len(items)

    def work(index):
        try:
            results[index] = function(items[index])
        except Exception as e:
            errors[index] = e

    with ThreadPoolExecutor(max_workers=maxWorkers) as executor:
        for _ in executor.map(work, range(len(items))):
            pass
    failures = [error for error in errors if error is not None]
    if failures:
        if len(failures) > 1:
            logger.debug("%d of %d parallel tasks failed", len(failures), len(items))
        raise failures[0]
    return results


if __name__ == "__main__":
    import doctest
    doctest.testmod()

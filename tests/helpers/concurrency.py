import threading


def run_in_threads(target_fn, n_threads: int, timeout: float = 5.0):
    """Start ``target_fn(i)`` on *n_threads* threads at once; return errors by index."""
    errors = [None] * n_threads
    start = threading.Barrier(n_threads)

    def worker(i):
        try:
            start.wait(timeout=timeout)
            target_fn(i)
        except Exception as e:
            errors[i] = e

    threads = [threading.Thread(target=worker, args=(i,), daemon=True) for i in range(n_threads)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=timeout + 1.0)
    return errors

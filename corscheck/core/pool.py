"""Worker pool — fans URLs out to N probe workers, fans findings back in."""

import queue
import threading
from concurrent.futures import ThreadPoolExecutor, wait
from typing import Callable, Iterable, Iterator, List, Optional

from corscheck.core.engine import Engine
from corscheck.core.models import CORSResult


Probe = Callable[[str], Optional[CORSResult]]

_DONE = object()


class WorkerPool:
    """
    Fixed-size pool of long-lived workers draining one shared URL queue.

    Usage:
        pool = WorkerPool(engine.probe, workers=70, logger=log)
        for result in pool.run(urls):
            ...
    """

    def __init__(self, probe: Probe, workers: int = 70, logger=None):
        if workers < 1:
            raise ValueError(f"workers must be >= 1, got {workers}")
        self.probe = probe
        self.workers = workers
        self.logger = logger

    def run(self, urls: Iterable[str]) -> Iterator[CORSResult]:
        """Yield every vulnerable result exactly once, in completion order."""
        todo: "queue.Queue[str]" = queue.Queue()
        for url in urls:
            url = url.strip()
            if url:
                todo.put(url)

        if todo.empty():
            return

        results: "queue.Queue" = queue.Queue()
        size = min(self.workers, todo.qsize())

        executor = ThreadPoolExecutor(max_workers=size, thread_name_prefix="probe")
        futures = [executor.submit(self._worker, todo, results) for _ in range(size)]

        def close():
            # Only after every worker has returned
            wait(futures)
            executor.shutdown(wait=True)
            results.put(_DONE)

        threading.Thread(target=close, name="probe-closer", daemon=True).start()

        while True:
            item = results.get()
            if item is _DONE:
                break
            yield item

    def _worker(self, todo: "queue.Queue[str]", results: "queue.Queue") -> None:
        while True:
            try:
                url = todo.get_nowait()
            except queue.Empty:
                return

            try:
                result = self.probe(url)
            except Exception as exc:
                if self.logger:
                    self.logger.warn(f"Probe crashed for {url}: {exc}")
                continue

            if result is not None and result.vulnerable:
                results.put(result)


def scan(urls: Iterable[str], workers: int = 70, timeout: float = 10,
         proxy: str | None = None, logger=None) -> List[CORSResult]:
    """Probe every URL and return the vulnerable results."""
    engine = Engine(timeout=timeout, proxy=proxy, logger=logger)
    return list(WorkerPool(engine.probe, workers=workers, logger=logger).run(urls))

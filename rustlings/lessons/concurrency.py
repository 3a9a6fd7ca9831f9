"""Threads sharing data, joining handles, a locked counter and a channel."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass, field
from queue import SimpleQueue
from typing import Iterable

_DONE = object()


def offset_sums(numbers: Iterable[int] = range(100), offsets: int = 8) -> dict[int, int]:
    """Sum every ``offsets``-th value, one thread per offset; map offset to sum."""
    shared = tuple(numbers)
    sums: dict[int, int] = {}
    lock = threading.Lock()

    def work(offset: int) -> None:
        total = sum(n for n in shared if n % offsets == offset)
        print(f"Sum of offset {offset} is {total}")
        with lock:
            sums[offset] = total

    threads = [threading.Thread(target=work, args=(offset,)) for offset in range(offsets)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return dict(sorted(sums.items()))


def run_threads(count: int = 10, delay: float = 0.25) -> int:
    """Start ``count`` sleeping threads and wait for all; return how many finished."""

    def work(index: int) -> None:
        time.sleep(delay)
        print(f"thread {index} is complete")

    threads = [threading.Thread(target=work, args=(i,)) for i in range(count)]
    for thread in threads:
        thread.start()
    completed = 0
    for thread in threads:
        thread.join()
        completed += 1
    if completed != count:
        raise RuntimeError("Oh no! All the spawned threads did not finish!")
    return completed


@dataclass
class JobStatus:
    """A job counter guarded by a lock."""

    jobs_completed: int = 0
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def complete_one(self) -> None:
        with self.lock:
            self.jobs_completed += 1

    @property
    def completed(self) -> int:
        with self.lock:
            return self.jobs_completed


def count_jobs(count: int = 10, delay: float = 0.25) -> int:
    """Have ``count`` threads each complete one job; return the final count."""
    status = JobStatus()

    def work() -> None:
        time.sleep(delay)
        status.complete_one()

    threads = [threading.Thread(target=work) for _ in range(count)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
        print(f"jobs completed {status.completed}")
    return status.completed


@dataclass
class Queue:
    """Two halves of values to send, and the pause between sends."""

    length: int = 10
    first_half: list[int] = field(default_factory=lambda: [1, 2, 3, 4, 5])
    second_half: list[int] = field(default_factory=lambda: [6, 7, 8, 9, 10])
    interval: float = 1.0


def send_tx(queue: Queue, tx: SimpleQueue) -> list[threading.Thread]:
    """Send both halves on ``tx`` from two threads; each ends with a done marker."""

    def send(values: list[int]) -> None:
        for value in values:
            print(f"sending {value}")
            tx.put(value)
            time.sleep(queue.interval)
        tx.put(_DONE)

    threads = [
        threading.Thread(target=send, args=(list(half),), daemon=True)
        for half in (queue.first_half, queue.second_half)
    ]
    for thread in threads:
        thread.start()
    return threads


def receive_all(queue: Queue) -> list[int]:
    """Receive every value sent for ``queue``; raise if the count differs from its length."""
    rx: SimpleQueue = SimpleQueue()
    senders = send_tx(queue, rx)
    pending = len(senders)
    received: list[int] = []
    while pending:
        item = rx.get()
        if item is _DONE:
            pending -= 1
            continue
        print(f"Got: {item}")
        received.append(item)
    print(f"total numbers received: {len(received)}")
    if len(received) != queue.length:
        raise RuntimeError(
            f"received {len(received)} numbers but the queue holds {queue.length}"
        )
    return received
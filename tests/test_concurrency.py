import pytest

from rustlings.lessons.concurrency import (
    JobStatus,
    Queue,
    count_jobs,
    offset_sums,
    receive_all,
    run_threads,
)


def test_offset_sums_cover_every_offset():
    sums = offset_sums(range(100), 8)
    assert list(sums) == list(range(8))


def test_offset_sums_total_matches_input():
    numbers = list(range(100))
    assert sum(offset_sums(numbers, 8).values()) == sum(numbers)


def test_offset_sums_small_example():
    assert offset_sums([1, 2, 3, 4], 2) == {0: 6, 1: 4}


def test_offset_sums_prints(capsys):
    offset_sums([0, 8], 8)
    assert "Sum of offset 0 is 8" in capsys.readouterr().out


def test_run_threads_waits_for_all():
    assert run_threads(5, 0) == 5


def test_run_threads_with_none():
    assert run_threads(0, 0) == 0


def test_count_jobs_counts_every_thread():
    assert count_jobs(10, 0) == 10


def test_job_status_counter():
    status = JobStatus()
    status.complete_one()
    status.complete_one()
    assert status.completed == 2


def test_receive_all_gets_every_value():
    queue = Queue(interval=0)
    received = receive_all(queue)
    assert len(received) == queue.length
    assert sorted(received) == sorted(queue.first_half + queue.second_half)


def test_receive_all_rejects_wrong_length():
    with pytest.raises(RuntimeError):
        receive_all(Queue(length=3, interval=0))


def test_receive_all_keeps_order_within_half():
    queue = Queue(interval=0)
    received = receive_all(queue)
    first = [v for v in received if v in queue.first_half]
    assert first == queue.first_half
import threading

import pytest

from blogkit.sync import AutoEvent, ManualEvent, Semaphore, Spinlock


def test_spinlock_protects_counter():
    lock = Spinlock()
    counter = [0]
    finished = Semaphore()

    def work():
        for _ in range(500):
            with lock:
                value = counter[0]
                counter[0] = value + 1
        finished.post()

    threads = [threading.Thread(target=work) for _ in range(4)]
    for t in threads:
        t.start()
    for _ in threads:
        assert finished.wait(timeout=10) is True
    for t in threads:
        t.join(timeout=10)
    assert finished.wait(timeout=0) is False
    assert counter[0] == 4 * 500


def test_spinlock_lock_unlock():
    lock = Spinlock()
    lock.lock()
    acquired = ManualEvent()

    def contender():
        lock.lock()
        acquired.signal()
        lock.unlock()

    t = threading.Thread(target=contender)
    t.start()
    assert acquired.wait(timeout=0.05) is False
    lock.unlock()
    assert acquired.wait(timeout=5) is True
    t.join(timeout=5)


def test_manual_event_times_out_when_unsignalled():
    event = ManualEvent()
    assert event.wait(timeout=0.01) is False


def test_manual_event_stays_signalled():
    event = ManualEvent()
    event.signal()
    assert event.wait(timeout=0) is True
    assert event.wait(timeout=0) is True


def test_manual_event_initial_state():
    assert ManualEvent(True).wait(timeout=0) is True


def test_manual_event_releases_all_waiters():
    event = ManualEvent()
    released = []
    lock = threading.Lock()
    all_done = Semaphore()

    def waiter(i):
        result = event.wait(timeout=5)
        with lock:
            released.append((i, result))
        all_done.post()

    threads = [threading.Thread(target=waiter, args=(i,)) for i in range(5)]
    for t in threads:
        t.start()
    event.signal()
    for _ in threads:
        assert all_done.wait(timeout=5) is True
    for t in threads:
        t.join(timeout=5)
    assert event.wait(timeout=0) is True
    assert sorted(released) == [(i, True) for i in range(5)]


def test_auto_event_resets_after_wait():
    event = AutoEvent()
    event.signal()
    assert event.wait(timeout=0) is True
    assert event.wait(timeout=0.01) is False


def test_auto_event_initial_state():
    event = AutoEvent(True)
    assert event.wait(timeout=0) is True
    assert event.wait(timeout=0) is False


def test_auto_events_alternate_threads():
    e1, e2 = AutoEvent(), AutoEvent()
    out = []

    def run(mine, other, letter):
        for _ in range(3):
            mine.wait()
            out.append(letter)
            other.signal()

    t1 = threading.Thread(target=run, args=(e1, e2, "A"))
    t2 = threading.Thread(target=run, args=(e2, e1, "B"))
    t1.start()
    t2.start()
    e1.signal()
    t1.join(timeout=5)
    t2.join(timeout=5)
    assert out == ["A", "B"] * 3
    assert e2.wait(timeout=0) is False
    assert e1.wait(timeout=0) is True


def test_semaphore_counts_permits():
    sem = Semaphore(2)
    assert sem.wait(timeout=0) is True
    assert sem.wait(timeout=0) is True
    assert sem.wait(timeout=0.01) is False
    sem.post(2)
    assert sem.wait(timeout=0) is True
    assert sem.wait(timeout=0) is True
    assert sem.wait(timeout=0) is False


def test_semaphore_single_post_wakes_waiter():
    sem = Semaphore()
    got = []
    t = threading.Thread(target=lambda: got.append(sem.wait(timeout=5)))
    t.start()
    sem.post()
    t.join(timeout=5)
    assert got == [True]
    assert sem.wait(timeout=0) is False


def test_semaphore_rejects_zero_post():
    with pytest.raises(ValueError):
        Semaphore().post(0)


def test_semaphore_rejects_negative_count():
    with pytest.raises(ValueError):
        Semaphore(-1)
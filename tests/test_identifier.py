"""Tests for id generation."""

import re
import threading
from datetime import datetime

from tukutil.ids import IdGenerator, initial_seed, new_id, new_uuid

ID_PATTERN = re.compile(r"^1\.2\.40\.0\.13\.1\.1\.3542466645\.\d{17}\.\d+$")


def test_new_id_format():
    """Ids are root + 17 digit timestamp + '.' + seed."""
    assert ID_PATTERN.match(new_id())


def test_new_id_unique():
    """Ids from one process never repeat."""
    ids = [new_id() for _ in range(1000)]
    assert len(set(ids)) == len(ids)


def test_seed_increments_by_one():
    """Seed goes up by exactly one per id."""
    gen = IdGenerator(seed=41)
    first = gen.new_id()
    second = gen.new_id()
    assert first.endswith(".41")
    assert second.endswith(".42")
    assert gen.seed == 43


def test_fixed_clock_and_root():
    """Id is built from the clock reading, root and seed."""
    gen = IdGenerator(root="9.9.", seed=7, clock=lambda: datetime(2021, 10, 21, 9, 0, 59, 143000))
    assert gen.new_id() == "9.9.20211021090059143.7"


def test_millisecond_zero_padded():
    """Milliseconds below 100 keep three digits."""
    gen = IdGenerator(root="1.", seed=0, clock=lambda: datetime(2024, 1, 2, 3, 4, 5, 7000))
    assert gen.new_id() == "1.20240102030405007.0"


def test_same_millisecond_ids_distinct():
    """Ids sharing a timestamp differ by seed."""
    gen = IdGenerator(seed=100, clock=lambda: datetime(2024, 1, 1))
    assert len({gen.new_id() for _ in range(50)}) == 50


def test_seed_grows_past_initial_width():
    """Seed is not bounded to five digits."""
    gen = IdGenerator(root="1.", seed=99999, clock=lambda: datetime(2024, 1, 1))
    gen.new_id()
    assert gen.new_id().endswith(".100000")


def test_unique_across_threads():
    """Concurrent callers never get the same seed."""
    gen = IdGenerator(seed=0, clock=lambda: datetime(2024, 1, 1))
    results = []
    lock = threading.Lock()

    def worker():
        local = [gen.new_id() for _ in range(200)]
        with lock:
            results.extend(local)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert len(set(results)) == 1600
    assert gen.seed == 1600


def test_initial_seed_range():
    """Initial seed has at most the requested number of digits."""
    assert 0 <= initial_seed() <= 99999
    assert 0 <= initial_seed(3) <= 999


def test_new_uuid():
    """new_uuid returns a UUID string."""
    u = new_uuid()
    assert re.match(r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[0-9a-f]{4}-[0-9a-f]{12}$", u)
    assert u != new_uuid()


def test_explicit_root_and_seed_skip_config(monkeypatch):
    """Generator built with root and seed never reads config."""
    def fail():
        raise AssertionError("config read")

    monkeypatch.setattr("tukutil.ids.identifier.get_config", fail)
    gen = IdGenerator(root="1.", seed=1, clock=lambda: datetime(2024, 1, 1))
    assert gen.new_id() == "1.20240101000000000.1"

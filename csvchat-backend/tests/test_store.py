import threading

from core.store import DatasetStore


def test_starts_empty():
    store = DatasetStore()
    assert store.snapshot() == ()
    assert len(store) == 0
    assert store.filename is None


def test_replace_swaps_whole_dataset():
    store = DatasetStore()
    store.replace([{"a": "1"}, {"a": "2"}], filename="first.csv")
    count = store.replace([{"b": "3"}], filename="second.csv")

    assert count == 1
    assert store.snapshot() == ({"b": "3"},)
    assert store.filename == "second.csv"


def test_snapshot_is_not_affected_by_later_mutation_of_input():
    store = DatasetStore()
    rows = [{"a": "1"}]
    store.replace(rows)
    rows.append({"a": "2"})
    assert len(store) == 1


def test_readers_never_see_partial_dataset():
    store = DatasetStore()
    small = [{"n": str(i)} for i in range(10)]
    large = [{"n": str(i)} for i in range(5000)]
    store.replace(small)
    seen = set()
    stop = threading.Event()

    def read():
        while not stop.is_set():
            seen.add(len(store.snapshot()))

    readers = [threading.Thread(target=read) for _ in range(4)]
    for t in readers:
        t.start()
    for _ in range(50):
        store.replace(large)
        store.replace(small)
    stop.set()
    for t in readers:
        t.join()

    assert seen <= {10, 5000}

"""
Priority Heap Demo -- drains min, max and custom-comparator heaps.
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent / "src"))

from priority_heap import Heap

SCENARIOS = [
    ("min-heap", Heap.min_heap, [3, 2, 1, 7, 5]),
    ("max-heap", Heap.max_heap, [3, 2, 1, 7, 5]),
    ("shortest string first", lambda: Heap(lambda a, b: len(a) < len(b)), ["aaa", "b", "cc"]),
]


def drain(heap):
    order = []
    while heap:
        order.append(heap.remove_first())
    return order


def main():
    for name, make_heap, values in SCENARIOS:
        heap = make_heap()
        for value in values:
            heap.add(value)
        print(f"{name}: inserted {values}")
        print(f"  top      -> {heap.top()!r}")
        print(f"  drained  -> {drain(heap)}")
        print(f"  after    -> top={heap.top()!r}, size={heap.size()}")


if __name__ == "__main__":
    main()

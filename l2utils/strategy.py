"""Interchangeable sorting algorithms."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


class Sorter(ABC):
    @abstractmethod
    def sort(self, data: list[int]) -> list[int]:
        """Return ``data`` in ascending order."""


class QuickSort(Sorter):
    """Recursive quicksort around the first element; builds new lists."""

    def sort(self, data: list[int]) -> list[int]:
        if len(data) < 2:
            return data
        pivot, *rest = data
        less = [value for value in rest if value <= pivot]
        greater = [value for value in rest if value > pivot]
        return self.sort(less) + [pivot] + self.sort(greater)


class BubbleSort(Sorter):
    """Bubble sort; sorts the given list in place and returns it."""

    def sort(self, data: list[int]) -> list[int]:
        done = False
        while not done:
            done = True
            for i in range(len(data) - 1):
                if data[i] > data[i + 1]:
                    data[i], data[i + 1] = data[i + 1], data[i]
                    done = False
        return data


@dataclass
class Selector:
    """Holds data together with the sorter to apply to it."""

    sorter: Sorter
    data: list[int] = field(default_factory=list)

    def perform_sort(self) -> list[int]:
        return self.sorter.sort(self.data)


def _format(values: list[int]) -> str:
    return "[" + " ".join(str(value) for value in values) + "]"


def run_strategy() -> None:
    """Sort a sample list with both algorithms and print the results."""
    selector = Selector(sorter=BubbleSort(), data=[5, 4, 1, 3, 7, 2, 10])
    print("Bubble Sort")
    print(_format(selector.perform_sort()))
    selector = Selector(sorter=QuickSort(), data=[5, 4, 1, 3, 7, 2, 10])
    print("Quick Sort")
    print(_format(selector.perform_sort()))
"""Command that exercises each data structure and reports the outcome of every step."""

from __future__ import annotations

import argparse
from typing import Any, Callable, Optional, Sequence as TypingSequence

from .dynamic_array import DynamicArray
from .fixed_array import FixedArray
from .linked_list import LinkedList
from .sequence import Sequence


def algo_checker(return_value: bool) -> None:
    """Report whether an operation succeeded."""
    print("Successfully" if return_value else "Error")


def size_printer(size: int) -> None:
    """Report the size of a data structure."""
    print(f"Data Structure Size: {size}")


def return_checker(return_value: Optional[Any]) -> None:
    """Report a looked-up value, or its absence."""
    if return_value is None:
        print("No return value")
    else:
        print(f"Value: {return_value}")


def _attempt(operation: Callable[..., Any], *args: Any) -> bool:
    try:
        operation(*args)
    except (IndexError, OverflowError):
        return False
    return True


def _exercise(seq: Sequence[int]) -> None:
    steps = [
        (seq.add_first, (10,)),
        (seq.add_first, (20,)),
        (seq.add_last, (30,)),
        (seq.add_last, (40,)),
        (seq.add_at, (2, 50)),
        (seq.add_at, (3, 60)),
        (seq.delete_first, ()),
        (seq.delete_last, ()),
        (seq.delete_at, (2,)),
        (seq.set, (2, 100)),
    ]
    for operation, args in steps:
        algo_checker(_attempt(operation, *args))
    return_checker(seq.get(0))
    return_checker(seq.get(10))
    algo_checker(_attempt(seq.add_at, 10, 60))
    algo_checker(_attempt(seq.set, 10, 100))
    size_printer(len(seq))
    seq.display()


def array_tester() -> None:
    """Exercise the fixed-capacity array."""
    print("======= Array Tester =======")
    _exercise(FixedArray(10))


def dynamic_array_tester() -> None:
    """Exercise the growable array."""
    print("======= Dynamic Array Tester =======")
    _exercise(DynamicArray())


def singly_linked_list_tester() -> None:
    """Exercise the singly linked list, including reversal."""
    print("======= Singly Linked List Tester =======")
    linked: LinkedList[int] = LinkedList()
    _exercise(linked)
    algo_checker(_attempt(linked.reverse))
    linked.display()


def main(argv: Optional[TypingSequence[str]] = None) -> int:
    """Run every tester in turn."""
    parser = argparse.ArgumentParser(
        description="Exercise the linear data structures and report each step."
    )
    parser.parse_args(argv)
    array_tester()
    dynamic_array_tester()
    singly_linked_list_tester()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
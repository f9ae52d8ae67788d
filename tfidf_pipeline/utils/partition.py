"""
Partition Module
Single-process stand-in for the keyed shuffle of a dataflow engine
"""
from typing import Callable, Dict, Hashable, Iterable, List, TypeVar

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)


def partition_by_key(records: Iterable[T], key_fn: Callable[[T], K]) -> Dict[K, List[T]]:
    """
    Group records by key.

    Keys keep first-seen order and each group keeps arrival order.

    Args:
        records: Record stream
        key_fn: Function returning the grouping key of a record

    Returns:
        Dict of key -> list of records
    """
    groups: Dict[K, List[T]] = {}
    for record in records:
        groups.setdefault(key_fn(record), []).append(record)
    return groups

"""Higher-order helpers over sequences, plus a one-shot channel handoff.

to_channel and collect are inverses: a producer thread feeds every item of
a sequence into a queue and then closes it, and the consumer drains the
queue until it is closed. Items always arrive in their original order.
"""

from __future__ import annotations

import queue
import threading
from typing import Any, Callable, Iterable, Iterator

CLOSED = object()


def map_items(xs: Iterable[Any], func: Callable[[Any], Any]) -> list[Any]:
    return [func(x) for x in xs]


def filter_items(xs: Iterable[Any], predicate: Callable[[Any], bool]) -> list[Any]:
    return [x for x in xs if predicate(x)]


def fold(xs: Iterable[Any], folder: Callable[[Any, Any], Any], initial: Any) -> Any:
    """Left fold: folder(folder(initial, x0), x1) ..."""
    acc = initial
    for x in xs:
        acc = folder(acc, x)
    return acc


def foreach(xs: Iterable[Any], func: Callable[[Any], Any]) -> None:
    for x in xs:
        func(x)


def _produce(channel: queue.Queue, items: list[Any]) -> None:
    for x in items:
        channel.put(x)
    channel.put(CLOSED)


def to_channel(xs: Iterable[Any]) -> queue.Queue:
    """Start a producer thread that puts every item of xs, then CLOSED."""
    items = list(xs)
    channel: queue.Queue = queue.Queue(maxsize=1)
    producer = threading.Thread(target=_produce, args=(channel, items), daemon=True)
    producer.start()
    return channel


def drain(channel: queue.Queue) -> Iterator[Any]:
    """Yield items until CLOSED. Blocks forever if the channel is never closed."""
    while True:
        item = channel.get()
        if item is CLOSED:
            return
        yield item


def collect(channel: queue.Queue) -> list[Any]:
    return list(drain(channel))

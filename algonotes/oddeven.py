"""Two threads taking turns to count odd and even numbers."""

from __future__ import annotations

import threading
import time

COUNT_MAX = 20


def odd_even(limit: int = COUNT_MAX, delay: float = 0.5) -> list[tuple[str, int]]:
    """Count from 1 to ``limit`` with an odd and an even thread taking turns.

    Returns ``(thread, number)`` pairs in the order they were produced, where
    ``thread`` is ``"odd"`` or ``"even"``. Each thread sleeps ``delay`` seconds
    after its turn.
    """
    if delay < 0:
        raise ValueError("delay must not be negative")

    cv = threading.Condition()
    state = {"odd_turn": True}
    output: list[tuple[str, int]] = []

    def run(name: str, start: int, is_odd: bool) -> None:
        counter = start
        while counter <= limit:
            with cv:
                cv.wait_for(lambda: state["odd_turn"] == is_odd)
                output.append((name, counter))
                counter += 2
                state["odd_turn"] = not is_odd
                cv.notify()
            time.sleep(delay)

    threads = [
        threading.Thread(target=run, args=("odd", 1, True)),
        threading.Thread(target=run, args=("even", 2, False)),
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return output
import heapq
import itertools
import time
from typing import List
from .util import get_logger


class Timer:
    """
    A callback scheduled on a Timeline. Timers order by due time, then by the
    order in which they were scheduled.
    """

    def __init__(self, when, seq, callback, args):
        self.when = when
        self.seq = seq
        self.callback = callback
        self.args = args
        self.cancelled = False
        self.fired = False

    def __lt__(self, other):
        return (self.when, self.seq) < (other.when, other.seq)

    def __repr__(self):
        state = 'cancelled' if self.cancelled else ('fired' if self.fired else 'pending')
        return f"Timer(when={self.when}, {getattr(self.callback, '__name__', self.callback)}, {state})"

    def cancel(self):
        # cancelling a timer that already fired is a no-op
        if not self.fired:
            self.cancelled = True

    def live(self) -> bool:
        return not (self.cancelled or self.fired)


class Completion:
    """
    A one-shot completion signal. Callbacks added before resolution run at
    resolution time, callbacks added afterwards run immediately.

    asyncio.Future is not used because it needs a running event loop, while
    Timeline drives every callback itself on a virtual clock.
    """

    def __init__(self):
        self._done = False
        self._result = None
        self._callbacks = []

    def done(self) -> bool:
        return self._done

    def result(self):
        if not self._done:
            raise RuntimeError("Completion has not resolved yet")
        return self._result

    def resolve(self, value=None):
        if self._done:
            return
        self._done = True
        self._result = value
        callbacks, self._callbacks = self._callbacks, []
        for fn in callbacks:
            fn(self)

    def add_done_callback(self, fn):
        if self._done:
            fn(self)
        else:
            self._callbacks.append(fn)


# --------------------------------------------------------------------------------------------------
def gather(completions) -> Completion:
    """
    joins a set of completions

    Parameters
    ----------
    completions: iterable of Completion

    Returns
    -------
    joined: Completion
        resolves with the list of results, in input order, once every input has resolved
    """
    completions = list(completions)
    joined = Completion()
    remaining = [len(completions)]

    if len(completions) == 0:
        joined.resolve([])
        return joined

    def _one_done(_):
        remaining[0] -= 1
        if remaining[0] == 0:
            joined.resolve([c.result() for c in completions])

    for c in completions:
        c.add_done_callback(_one_done)
    return joined


class Timeline:
    """
    Single-threaded virtual clock. Nothing runs until the owner drives the
    timeline with run_until, advance or run_until_idle.
    """

    def __init__(self):
        self.now = 0
        self._queue: List[Timer] = []
        self._seq = itertools.count()

    def call_later(self, delay, callback, *args) -> Timer:
        if delay < 0:
            raise ValueError(f"Cannot schedule a callback {delay} ticks in the past")
        timer = Timer(self.now + delay, next(self._seq), callback, args)
        heapq.heappush(self._queue, timer)
        return timer

    def pending(self) -> int:
        return len([t for t in self._queue if t.live()])

    def _pop_live(self, until=None):
        while self._queue:
            if until is not None and self._queue[0].when > until:
                return None
            timer = heapq.heappop(self._queue)
            if timer.cancelled:
                continue
            return timer
        return None

    def _fire(self, timer):
        self.now = timer.when
        timer.fired = True
        timer.callback(*timer.args)

    def run_until(self, until):
        fired = 0
        while True:
            timer = self._pop_live(until)
            if timer is None:
                break
            self._fire(timer)
            fired += 1
        self.now = max(self.now, until)
        return fired

    def advance(self, ticks):
        return self.run_until(self.now + ticks)

    def run_until_idle(self, pace=0.0):
        fired = 0
        while True:
            timer = self._pop_live()
            if timer is None:
                break
            if pace > 0 and timer.when > self.now:
                time.sleep((timer.when - self.now) * pace)
            self._fire(timer)
            fired += 1
        get_logger().debug(f"Timeline idle at t={self.now} after firing {fired} timers")
        return fired

"""
Scheduled event queue - "at time T, apply effect E"
Replaces wall-clock callbacks so timing can be driven by simulated time
"""

import heapq
import itertools
from enum import Enum, auto


class EventKind(Enum):
    """Deferred effects the simulation knows how to apply"""
    BOMB_FUSE = auto()
    EXPLOSION_CLEAR = auto()
    MONSTER_TICK = auto()


class ScheduledEvent:
    def __init__(self, due_ms, kind, payload=None):
        self.due_ms = due_ms
        self.kind = kind
        self.payload = payload

    def __repr__(self):
        return f"ScheduledEvent({self.kind.name} at {self.due_ms}ms, payload={self.payload})"


class EventQueue:
    """
    Min-heap of pending events; ties on due time keep scheduling order
    """
    def __init__(self):
        self._heap = []
        self._seq = itertools.count()

    def schedule(self, due_ms, kind, payload=None):
        """
        Queue an event

        Args:
            due_ms: Simulation time the event fires at
            kind: EventKind
            payload: Event data (e.g. a bomb id)

        Returns:
            ScheduledEvent
        """
        event = ScheduledEvent(due_ms, kind, payload)
        heapq.heappush(self._heap, (due_ms, next(self._seq), event))
        return event

    def peek_due(self):
        """Due time of the next event, or None when empty"""
        if not self._heap:
            return None
        return self._heap[0][0]

    def pop_due(self, now_ms):
        """
        Yield every event due at or before now_ms, earliest first

        Events scheduled while iterating are picked up if they are also due.
        """
        while self._heap and self._heap[0][0] <= now_ms:
            _, _, event = heapq.heappop(self._heap)
            yield event

    def pending(self, kind=None):
        """Pending events in due order, optionally filtered by kind"""
        events = [entry[2] for entry in sorted(self._heap, key=lambda e: (e[0], e[1]))]
        if kind is not None:
            events = [e for e in events if e.kind == kind]
        return events

    def clear(self):
        self._heap.clear()

    def __len__(self):
        return len(self._heap)

    def __repr__(self):
        return f"EventQueue(pending={len(self._heap)}, next={self.peek_due()})"

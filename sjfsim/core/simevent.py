#===============================================================================
# MODULE simevent
#
# Copyright (C) 2024 Howard Klein - All Rights Reserved
#
# Defines the EventKind enumeration, and the SimEvent and EventTimeline
# classes.
#
# A SimEvent is a scheduled state transition: an arrival, a departure, or the
# end of the simulation, tagged with the (integer) clock time at which it
# fires and, for arrivals and departures, the customer it concerns.
#
# The EventTimeline holds the pending events of a single simulation run,
# ordered by event time. Events scheduled for the same time are processed in
# the order they were inserted; to make that explicit (rather than an
# accident of traversal order), every event is stamped with a registration
# sequence number drawn from a per-timeline counter, and (time, sequence
# number) is the event's total-order key.
#
# The timeline is a deque kept in sorted order. Insertion distinguishes four
# cases:
#
#   1. the timeline is empty
#   2. the new event is strictly earlier than the current earliest event
#      (appendleft)
#   3. the new event is no earlier than the current latest event (append);
#      this is by far the most common case, since most events are scheduled
#      after everything already pending
#   4. anything else: scan from the front for the first event scheduled
#      strictly later than the new one, and insert immediately before it
#
# Cases 2 and 3 guarantee that the scan in case 4 finds its insertion point;
# if it does not, the sort invariant was broken earlier and we raise
# InvariantViolation.
#
# The timeline offers only ordered insertion and removal of the earliest
# event; there is no peek and no removal by key.
#===============================================================================
__all__ = ['EventKind', 'SimEvent', 'EventTimeline']

import itertools
from collections import deque
from enum import Enum

from sjfsim.core.simexception import EmptyTimelineError, InvariantViolation
from sjfsim.core.simlogging import SimLogging

logger = SimLogging.get_logger(__name__)


class EventKind(Enum):
    """
    The kinds of simulation event.
    """
    ARRIVAL = 0
    DEPARTURE = 1
    END_OF_SIMULATION = 2


class SimEvent(object):
    """
    A scheduled simulation event. Events are created by
    :meth:`EventTimeline.insert`, owned by the timeline until removed, and
    then owned by the simulation driver, which discards them after
    processing.

    :param kind:        The kind of event
    :type kind:         :class:`EventKind`

    :param tm:          The clock time at which the event is to occur
    :type tm:           `int`

    :param customer:    The customer responsible for the event, if any
    :type customer:     :class:`~.customer.Customer` or `None`

    :param sequencenum: Registration order within the owning timeline
    :type sequencenum:  `int`

    """
    __slots__ = ('_kind', '_time', '_customer', '_sequencenum')

    def __init__(self, kind, tm, customer=None, sequencenum=-1):
        assert isinstance(kind, EventKind), 'SimEvent kind ' + str(kind) + ' is not an EventKind'
        self._kind = kind
        self._time = tm
        self._customer = customer
        self._sequencenum = sequencenum

    @property
    def kind(self):
        return self._kind

    @property
    def time(self):
        """
        The clock time at which the event is scheduled to be processed.
        """
        return self._time

    @property
    def customer(self):
        return self._customer

    @property
    def sequencenum(self):
        return self._sequencenum

    @property
    def key(self):
        """
        The event's total-order key: (time, sequence number)
        """
        return (self._time, self._sequencenum)

    def __str__(self):
        return self._kind.name + " scheduled time:" + str(self._time)


class EventTimeline(object):
    """
    The pending events of a simulation run, ordered by time and, among
    events with the same time, by insertion order.
    """
    def __init__(self):
        self._events = deque()
        self._counter = itertools.count()

    def __len__(self):
        return len(self._events)

    def __iter__(self):
        return iter(self._events)

    @property
    def is_empty(self):
        return not self._events

    def insert(self, kind, tm, customer=None):
        """
        Create and insert a new event, preserving timeline order.

        :param kind:     The kind of event
        :type kind:      :class:`EventKind`

        :param tm:       The clock time at which the event is to occur
        :type tm:        `int`

        :param customer: The customer associated with the event, if any
        :type customer:  :class:`~.customer.Customer` or `None`

        :return:         The newly inserted event
        :rtype:          :class:`SimEvent`

        :raises:         :class:`~.simexception.InvariantViolation` if the
                         insertion point cannot be found
        """
        event = SimEvent(kind, tm, customer, next(self._counter))
        events = self._events

        if not events:
            events.append(event)
        elif tm < events[0].time:
            events.appendleft(event)
        elif tm >= events[-1].time:
            events.append(event)
        else:
            for i, pos in enumerate(events):
                if pos.time > tm:
                    events.insert(i, event)
                    break
            else:
                msg = "No insertion point found for {0} in event timeline"
                raise InvariantViolation(msg, event)

        return event

    def remove_earliest(self):
        """
        Remove and return the earliest event.

        :raises: :class:`~.simexception.EmptyTimelineError` if there are
                 no pending events
        """
        if not self._events:
            raise EmptyTimelineError()
        return self._events.popleft()

#===============================================================================
# PACKAGE core
#
# Copyright (C) 2024 Howard Klein - All Rights Reserved
#
# The simulation core: exceptions, logging, configuration, clock, random
# variates, and the event timeline / ready queue data structures.
#===============================================================================
from sjfsim.core.simexception import (SimException, SimError,
                                      EmptyTimelineError, EmptyQueueError,
                                      InvariantViolation)
from sjfsim.core.simlogging import SimLogging
from sjfsim.core.simclock import SimClock
from sjfsim.core.simrandom import VariateGenerator, SCALE
from sjfsim.core.customer import Customer
from sjfsim.core.simevent import EventKind, SimEvent, EventTimeline
from sjfsim.core.readyqueue import SJFReadyQueue
from sjfsim.core.stats import ResponseTimeStats
from sjfsim.core import (simexception, simclock, simrandom, simevent,
                         readyqueue, stats)

__all__ = ['SimException', 'SimError', 'EmptyTimelineError',
           'EmptyQueueError', 'InvariantViolation', 'SimLogging', 'SimClock',
           'VariateGenerator', 'SCALE', 'Customer', 'EventKind', 'SimEvent',
           'EventTimeline', 'SJFReadyQueue', 'ResponseTimeStats',
           'simexception', 'simclock', 'simrandom', 'simevent', 'readyqueue',
           'stats']

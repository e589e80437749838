#===============================================================================
# MODULE simulation
#
# Copyright (C) 2024 Howard Klein - All Rights Reserved
#
# Defines the SimulationParameters, Simulation and SimulationResult classes.
#
# A Simulation instance is one run of the single-server SJF queue: it owns
# the clock, event timeline, ready queue, server state, statistics and random
# variate generator for that run, so any number of runs can exist side by
# side. Simulation.replicate() executes a range of independent replications
# (run numbers) in a multiprocessing pool, one Simulation per run.
#
# The driver is a small state machine (server IDLE or BUSY) advanced by
# events taken from the timeline in time order:
#
#   ARRIVAL:     schedule the next arrival, stamp the arriving customer and
#                draw its burst, enqueue it, and start service if idle
#   DEPARTURE:   go idle, record the customer's response time, and start
#                service on the next shortest job if any is waiting
#   END_OF_SIMULATION: stop and report
#
# The END_OF_SIMULATION event is scheduled before the first arrival, so events
# falling on the final tick that were scheduled later are never processed.
#
# This program is free software: you can redistribute it and/or modify it under
# the terms of the GNU General Public License as published by the Free Software
# Foundation, either version 3 of the License, or (at your option) any later
# version.
#
# This program is distributed in the hope that it will be useful, but WITHOUT
# ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS
# FOR A PARTICULAR PURPOSE. See the GNU General Public License for more details.
#===============================================================================
import sys, os, math, multiprocessing
from numbers import Integral, Real
from traceback import format_tb
from typing import NamedTuple

from sjfsim.core import (SimError, SimClock, VariateGenerator, Customer,
                         EventKind, EventTimeline, SJFReadyQueue,
                         ResponseTimeStats)
from sjfsim.core.stats import scaled_mean
from sjfsim.core.simlogging import SimLogging
import sjfsim.core.configuration as simconfig

_ERROR_NAME = "Simulation Error"
_PARAMETER_ERROR = "Invalid Simulation Parameter"
_REPLICATION_ERROR = "Replication Error"

logger = SimLogging.get_logger(__name__)


class SimulationParameters(NamedTuple):
    """
    The inputs of a simulation run.

    :param mean_interarrival: Mean time between arrivals (> 0)
    :param mean_service:      Mean customer burst (service) time (> 0)
    :param length:            Simulation length, in clock ticks (> 0)
    :param seed:              Random number generator seed (>= 0)
    """
    mean_interarrival: float
    mean_service: float
    length: int
    seed: int

    def validate(self):
        """
        Raise a :class:`~.simexception.SimError` if any parameter is out
        of range; returns self otherwise.
        """
        for name in ('mean_interarrival', 'mean_service'):
            value = getattr(self, name)
            if (isinstance(value, bool) or not isinstance(value, Real) or
                    not math.isfinite(value) or value <= 0):
                msg = "{0} ({1}) must be a positive number"
                raise SimError(_PARAMETER_ERROR, msg, name, value)

        if (isinstance(self.length, bool) or not isinstance(self.length, Integral)
                or self.length <= 0):
            msg = "length ({0}) must be a positive integer"
            raise SimError(_PARAMETER_ERROR, msg, self.length)

        if (isinstance(self.seed, bool) or not isinstance(self.seed, Integral)
                or self.seed < 0):
            msg = "seed ({0}) must be a non-negative integer"
            raise SimError(_PARAMETER_ERROR, msg, self.seed)

        return self

    @classmethod
    def from_configuration(cls, mean_interarrival=None, mean_service=None,
                           length=None, seed=None):
        """
        Build parameters from the passed values, taking any that are None
        from the [Simulation] configuration settings.
        """
        if mean_interarrival is None:
            mean_interarrival = simconfig.get_mean_interarrival_time()
        if mean_service is None:
            mean_service = simconfig.get_mean_service_time()
        if length is None:
            length = simconfig.get_simulation_length()
        if seed is None:
            seed = simconfig.get_seed()
        return cls(mean_interarrival, mean_service, length, seed).validate()


class Simulation(object):
    """
    A single run of the single-server Shortest-Job-First queueing
    simulation. Typical usage::

        params = SimulationParameters(5.0, 3.0, 1000, 42)
        result = Simulation(params).run()
        result.print_summary()

    A Simulation can be run once. :meth:`step` processes one event at a
    time after :meth:`initialize`, for clients (and tests) that want to
    observe intermediate states.

    :param parameters: The run's inputs; validated on construction
    :type parameters:  :class:`SimulationParameters`

    :param run_number: Replication run number, selecting the random stream.
                       Defaults to 1.
    :type run_number:  `int`

    :param variates:   Source of exponential variates; defaults to a
                       :class:`~.simrandom.VariateGenerator` seeded from
                       the parameters. Anything with a compatible
                       ``draw_exponential(mean)`` may be supplied.

    """
    def __init__(self, parameters, run_number=1, variates=None):
        self._parameters = SimulationParameters(*parameters).validate()
        self._run_number = run_number
        if variates is None:
            variates = VariateGenerator(self._parameters.seed, run_number)
        self._variates = variates

        self._clock = SimClock()
        self._timeline = EventTimeline()
        self._queue = SJFReadyQueue()
        self._stats = ResponseTimeStats()
        self._busy = False
        self._initialized = False
        self._finished = False
        self._events_processed = 0

        self._handlers = {EventKind.ARRIVAL: self._arrive,
                          EventKind.DEPARTURE: self._depart,
                          EventKind.END_OF_SIMULATION: self._end_simulation}

    @property
    def parameters(self):
        return self._parameters

    @property
    def run_number(self):
        return self._run_number

    @property
    def clock(self):
        return self._clock

    @property
    def timeline(self):
        return self._timeline

    @property
    def queue(self):
        return self._queue

    @property
    def stats(self):
        return self._stats

    @property
    def busy(self):
        """
        True while a customer is in service
        """
        return self._busy

    @property
    def finished(self):
        return self._finished

    @property
    def events_processed(self):
        return self._events_processed

    def initialize(self):
        """
        Prime the event timeline: schedule the end of the simulation, then
        generate the first arrival.
        """
        if self._initialized:
            raise SimError(_ERROR_NAME, "Simulation run {0} is already initialized",
                           self._run_number)
        self._initialized = True
        self._timeline.insert(EventKind.END_OF_SIMULATION, self._parameters.length)
        self._gen_arrival()

    def step(self):
        """
        Remove the earliest event from the timeline, advance the clock to
        its time and process it. Returns the processed event.

        Internal consistency errors (empty timeline or ready queue, broken
        sort order) are logged and re-raised; the run cannot continue
        after one.
        """
        if not self._initialized:
            raise SimError(_ERROR_NAME, "Simulation run {0} is not initialized",
                           self._run_number)
        if self._finished:
            raise SimError(_ERROR_NAME, "Simulation run {0} has already ended",
                           self._run_number)
        try:
            event = self._timeline.remove_earliest()
            self._clock.advance_to(event.time)
            self._handlers[event.kind](event)
        except SimError as e:
            logger.error("Simulation run %d aborted at time %d: %s",
                         self._run_number, self._clock.now(), e)
            raise
        self._events_processed += 1
        return event

    def run(self):
        """
        Execute the simulation until the end-of-simulation event is
        processed.

        :return: The run's statistics
        :rtype:  :class:`SimulationResult`

        """
        logger.info("Simulation run %d begins: %s", self._run_number,
                    self._parameters)
        self.initialize()
        while not self._finished:
            self.step()
        result = self.result()
        logger.info("Simulation run %d ends: %d customers completed, %d events processed",
                    self._run_number, result.completed, result.events_processed)
        return result

    def result(self):
        """
        Return a :class:`SimulationResult` for the current statistics
        """
        return SimulationResult(self._parameters, self._run_number,
                                self._stats.total, self._stats.count,
                                self._events_processed, self._clock.now(),
                                self._queue.max_length)

    def _arrive(self, event):
        """
        Process an arrival: generate the next arrival, stamp the customer and
        draw its burst, queue it, and start service if the server is idle.
        """
        self._gen_arrival()
        customer = event.customer
        customer.arrival_time = self._clock.now()
        customer.burst = self._variates.draw_exponential(self._parameters.mean_service)
        self._queue.enqueue(customer)
        if not self._busy:
            self._start_service()

    def _start_service(self):
        """
        Take the shortest job from the queue, make the server busy, and
        schedule the job's departure.
        """
        assert not self._busy, "Service started while server is busy"
        customer = self._queue.dequeue_shortest()
        self._busy = True
        self._gen_departure(customer)

    def _depart(self, event):
        """
        Process a departure: free the server, accumulate response time, and
        start the next service if anyone is waiting.
        """
        self._busy = False
        customer = event.customer
        response_time = customer.response_time(self._clock.now())
        logger.debug(" Response time for customer is %d", response_time)
        self._stats.add(response_time)
        if not self._queue.is_empty:
            self._start_service()

    def _end_simulation(self, event):
        self._finished = True

    def _gen_arrival(self):
        """
        Create the next customer and schedule its arrival after an
        exponential interarrival time.
        """
        customer = Customer()
        tm = self._variates.draw_exponential(self._parameters.mean_interarrival)
        logger.debug(" Interarrival time for customer is %d", tm)
        logger.debug(" Arrival time for customer is %d", self._clock.now() + tm)
        self._timeline.insert(EventKind.ARRIVAL, self._clock.now() + tm, customer)

    def _gen_departure(self, customer):
        """
        Schedule a customer's departure one burst from now.
        """
        tm = customer.burst
        logger.debug(" Service time for customer is %d", tm)
        logger.debug(" Departure time for customer is %d", self._clock.now() + tm)
        self._timeline.insert(EventKind.DEPARTURE, self._clock.now() + tm, customer)

    @staticmethod
    def execute(parameters, run_number=1):
        """
        Create and run a single simulation; returns its
        :class:`SimulationResult`.
        """
        return Simulation(parameters, run_number).run()

    @staticmethod
    def replicate(parameters, from_run, to_run, processes=None):
        """
        Execute replications for run numbers from_run through to_run
        (inclusive). Each replication is an independent Simulation using
        the random stream for its run number.

        When more than one replication is requested and processes is not 1,
        the replications are executed by a multiprocessing pool of (at most)
        processes workers; processes=None uses the pool default.

        :return: Results ordered by run number
        :rtype:  `list` of :class:`SimulationResult`

        :raises: :class:`~.simexception.SimError` if the run range is
                 invalid or any replication fails
        """
        parameters = SimulationParameters(*parameters).validate()
        max_run = simconfig.get_max_replications()
        if not (1 <= from_run <= to_run <= max_run):
            msg = "Invalid run range {0}-{1}; run numbers must be in range 1-{2}"
            raise SimError(_REPLICATION_ERROR, msg, from_run, to_run, max_run)

        runs = range(from_run, to_run + 1)
        tasks = [(parameters, run) for run in runs]
        if processes == 1 or len(tasks) == 1:
            outcomes = [execute_replication(*task) for task in tasks]
        else:
            with multiprocessing.Pool(processes=processes) as pool:
                outcomes = pool.starmap(execute_replication, tasks)

        results = []
        for run_number, result, exception, tbstring in outcomes:
            if exception is not None:
                logger.error("Replication %d failed: %s\n%s", run_number,
                             exception, tbstring)
                msg = "Replication {0} failed: {1}"
                raise SimError(_REPLICATION_ERROR, msg, run_number, exception)
            results.append(result)
        return results


def execute_replication(parameters, run_number):
    """
    Create and execute one replication, capturing any failure. Designed as a
    task to be executed by a multiprocessing Pool. Returns the run number,
    the result (or None), the exception message (or None) and a formatted
    traceback (or None).
    """
    try:
        logger.info("execute replication for run %d pid %d", run_number,
                    os.getpid())
        result = Simulation(parameters, run_number).run()
    except Exception as e:
        tbstring = "".join(format_tb(e.__traceback__))
        return run_number, None, str(e), tbstring

    return run_number, result, None, None


class SimulationResult(object):
    """
    The statistics produced by a simulation run at the end of the
    simulation.

    :param parameters:       The run's inputs
    :param run_number:       The run's replication number
    :param total:            Accumulated response time, in clock ticks
    :param completed:        Number of customers that departed
    :param events_processed: Number of events processed, including the
                             end-of-simulation event
    :param end_time:         Clock time when the run ended
    :param max_queue_length: Longest ready queue observed

    """
    def __init__(self, parameters, run_number, total, completed,
                 events_processed, end_time, max_queue_length):
        self.parameters = parameters
        self.run_number = run_number
        self.accumulated_response_time = total
        self.completed = completed
        self.events_processed = events_processed
        self.end_time = end_time
        self.max_queue_length = max_queue_length

    @property
    def mean_response_time(self):
        """
        Mean time in the system per completed customer, in unscaled time
        units; NaN if no customer completed.
        """
        return scaled_mean(self.accumulated_response_time, self.completed)

    def print_summary(self, destination=None):
        """
        Write the simulation results report to destination (a file-like
        object), or sys.stdout if None.
        """
        if destination is None:
            destination = sys.stdout
        print("...Simulation ends", file=destination)
        print(" Simulation results", file=destination)
        print(" mean response time ---------> %-6.3f" % self.mean_response_time,
              file=destination)

    def __repr__(self):
        return ('SimulationResult(run={0}, completed={1}, mean_response_time={2})'
                .format(self.run_number, self.completed, self.mean_response_time))

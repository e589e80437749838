#===============================================================================
# MODULE readyqueue
#
# Copyright (C) 2024 Howard Klein - All Rights Reserved
#
# Defines the SJFReadyQueue class, the queue of customers waiting for the
# server, ordered for Shortest-Job-First service.
#
# Customers are kept in ascending burst order; among customers with equal
# bursts, the one enqueued first is served first. Insertion follows the same
# four-case structure as the event timeline (empty, new head, new tail,
# middle). The middle scan is bounded by the queue length rather than by the
# sort order: it never steps past the tail, and running out of candidates
# (impossible while the queue is sorted, since the new-tail case has already
# handled bursts no shorter than the tail's) raises InvariantViolation.
#===============================================================================
__all__ = ['SJFReadyQueue']

from collections import deque

from sjfsim.core.simexception import EmptyQueueError, InvariantViolation
from sjfsim.core.simlogging import SimLogging

logger = SimLogging.get_logger(__name__)


class SJFReadyQueue(object):
    """
    A queue of :class:`~.customer.Customer` objects ordered by burst
    length, FIFO among equal bursts.
    """
    def __init__(self):
        self._customers = deque()
        self._max_length = 0

    def __len__(self):
        return len(self._customers)

    def __iter__(self):
        return iter(self._customers)

    @property
    def is_empty(self):
        return not self._customers

    @property
    def max_length(self):
        """
        The largest number of customers simultaneously waiting so far.
        """
        return self._max_length

    def enqueue(self, customer):
        """
        Insert a customer, preserving ascending burst order.

        :param customer: The customer to enqueue; its burst must be set
        :type customer:  :class:`~.customer.Customer`

        :raises:         :class:`~.simexception.InvariantViolation` if the
                         insertion point cannot be found
        """
        assert customer.burst is not None, "Enqueued customer has no burst"
        customers = self._customers
        burst = customer.burst

        if not customers:
            customers.append(customer)
        elif burst < customers[0].burst:
            customers.appendleft(customer)
        elif burst >= customers[-1].burst:
            customers.append(customer)
        else:
            # customers[0] cannot follow the new customer; the scan ends at
            # the tail, which is known to have a longer burst
            for i in range(1, len(customers)):
                if burst < customers[i].burst:
                    customers.insert(i, customer)
                    break
            else:
                msg = "No insertion point found for {0} in ready queue of length {1}"
                raise InvariantViolation(msg, customer, len(customers))

        if len(customers) > self._max_length:
            self._max_length = len(customers)

    def dequeue_shortest(self):
        """
        Remove and return the customer with the shortest burst.

        :raises: :class:`~.simexception.EmptyQueueError` if no customer is
                 waiting
        """
        if not self._customers:
            raise EmptyQueueError()
        return self._customers.popleft()

#===============================================================================
# MODULE customer
#
# Copyright (C) 2024 Howard Klein - All Rights Reserved
#
# Defines the Customer class.
#===============================================================================
__all__ = ['Customer']


class Customer(object):
    """
    A customer (job) flowing through the single-server system.

    A customer is created when its arrival is scheduled, with neither time
    set. On arrival the driver stamps the arrival time and draws the burst;
    the same object is then handed from the arrival event to the ready queue
    and on to its departure event. It is never copied, and is released once
    its response time has been recorded.
    """
    __slots__ = ('arrival_time', 'burst')

    def __init__(self, arrival_time=None, burst=None):
        self.arrival_time = arrival_time
        self.burst = burst

    def response_time(self, departure_time):
        """
        Return the time spent in the system for a departure at the passed
        clock time.
        """
        assert self.arrival_time is not None, "Customer has not arrived"
        return departure_time - self.arrival_time

    def __repr__(self):
        return 'Customer(arrival_time={0}, burst={1})'.format(self.arrival_time,
                                                               self.burst)

#===============================================================================
# MODULE sjf_theory
#
# Copyright (C) 2024 Howard Klein - All Rights Reserved
#
# Functions that calculate the expected (mean) response time of an M/M/1
# queue under non-preemptive Shortest-Job-First and under FCFS service, for
# comparison with simulated results.
#
# SJF uses the M/G/1 non-preemptive shortest-job-first result (Phipps, 1956;
# see Harchol-Balter, "Performance Modeling and Design of Computer Systems",
# ch. 31): a job of size x waits on average
#
#     W(x) = (lambda * E[S^2] / 2) / ((1 - rho(x-)) * (1 - rho(x)))
#
# where rho(x) = lambda * integral_0^x t f(t) dt is the load made up of jobs
# no larger than x, and rho(x-) the load of jobs strictly smaller than x.
# For exponential sizes the two coincide, so the integrand below uses
# rho(x) for both factors. The mean response time is
# E[S] + integral_0^inf W(x) f(x) dx, which we evaluate numerically with SciPy.
#===============================================================================
import math
from scipy import integrate

from sjfsim.core import SimError

_ERROR_NAME = "Queueing Theory Error"


def _rates(meanIATime, meanServiceTime):
    if meanIATime <= 0 or meanServiceTime <= 0:
        msg = "Mean interarrival ({0}) and service ({1}) times must be positive"
        raise SimError(_ERROR_NAME, msg, meanIATime, meanServiceTime)

    lamb = 1.0 / meanIATime
    mu = 1.0 / meanServiceTime
    rho = lamb / mu
    if rho >= 1.0:
        msg = "System is unstable: utilization {0:.3f} is not less than one"
        raise SimError(_ERROR_NAME, msg, rho)
    return lamb, mu, rho


def mm1_fcfs_response_time(meanIATime, meanServiceTime):
    """
    Expected time in system for an M/M/1 FCFS queue: 1 / (mu - lambda)
    """
    lamb, mu, rho = _rates(meanIATime, meanServiceTime)
    return 1.0 / (mu - lamb)


def mm1_sjf_response_time(meanIATime, meanServiceTime):
    """
    Expected time in system for an M/M/1 queue with non-preemptive
    shortest-job-first service.
    """
    lamb, mu, rho = _rates(meanIATime, meanServiceTime)
    es2 = 2.0 / mu ** 2

    def density(x):
        return mu * math.exp(-mu * x)

    def load_up_to(x):
        # lambda * integral_0^x t mu e^(-mu t) dt, in closed form
        return lamb * (1.0 - math.exp(-mu * x) * (1.0 + mu * x)) / mu

    def weighted_wait(x):
        rho_x = load_up_to(x)
        return (lamb * es2 / 2.0) / ((1.0 - rho_x) * (1.0 - rho_x)) * density(x)

    mean_wait, abserr = integrate.quad(weighted_wait, 0.0, math.inf)
    return meanServiceTime + mean_wait


def theory_results(meanIATime, meanServiceTime):
    """
    Return a dictionary with the utilization and the expected SJF and FCFS
    response times of an M/M/1 queue.
    """
    lamb, mu, rho = _rates(meanIATime, meanServiceTime)
    return {'utilization': rho,
            'sjf_response_time': mm1_sjf_response_time(meanIATime, meanServiceTime),
            'fcfs_response_time': mm1_fcfs_response_time(meanIATime, meanServiceTime)}


def print_theory_results(meanIATime, meanServiceTime, destination=None):
    """
    Print the queueing theory calculation for the passed parameters.
    """
    results = theory_results(meanIATime, meanServiceTime)
    print('Queuing Theory calculation:', file=destination)
    print(' rho (utilization): ', results['utilization'], file=destination)
    print(' Expected SJF Response Time: ', results['sjf_response_time'],
          file=destination)
    print(' Expected FCFS Response Time: ', results['fcfs_response_time'],
          file=destination)

#===============================================================================
# MODULE simulate
#
# Copyright (C) 2024 Howard Klein - All Rights Reserved
#
# Implements the command line interface to the simulator.
#===============================================================================
import sys, argparse
import logging

from sjfsim.core import SimError
from sjfsim.core.simlogging import SimLogging
import sjfsim.core.configuration as simconfig

_USAGE = """
usage: %(prog)s [-h/--help]
                [-i/--interarrival <mean interarrival time>]
                [-s/--service <mean service time>]
                [-l/--length <simulation length in ticks>]
                [--seed <seed>]
                [-run <run number> [to run number]]
                [-j/--processes n]
                [-p/--prompt]
                [-t/--theory]
                [-v/--verbosity {error, warn, info, debug}]
"""

_BANNER = "   SIMULATION -- M/M/1 Queueing System"

logger = SimLogging.get_logger(__name__)


def _positiveInt(string):
    """
    Helper function that converts a string to an integer, raising
    an ArgumentTypeError if the string does not represent a positive
    integer.
    """
    try:
        numvalue = int(string)
    except ValueError:
        msg = 'argument must be a positive integer'
        raise argparse.ArgumentTypeError(msg)

    if numvalue <= 0:
        msg = 'argument must be greater than zero'
        raise argparse.ArgumentTypeError(msg)

    return numvalue

def _nonNegativeInt(string):
    """
    Helper function that converts a string to an integer >= 0, raising
    an ArgumentTypeError otherwise.
    """
    try:
        numvalue = int(string)
    except ValueError:
        msg = 'argument must be a non-negative integer'
        raise argparse.ArgumentTypeError(msg)

    if numvalue < 0:
        msg = 'argument must not be negative'
        raise argparse.ArgumentTypeError(msg)

    return numvalue

def _positive(string):
    """
    Helper function that converts a string to a positive float, raising an
    ArgumentTypeError if either:
    a) The passed string cannot be converted to a number, or
    b) The resulting value is not greater than zero
    """
    try:
        val = float(string)
    except ValueError:
        raise argparse.ArgumentTypeError('argument must be a positive number')
    if val > 0 and val != float('inf'):
        return val
    else:
        raise argparse.ArgumentTypeError('argument must be greater than zero')


class SimulationRunAction(argparse.Action):
    """
    A custom argparse.Action subclass that validates the run numbers specified
    as arguments to the -run option. The user may specify either one or two run
    numbers. If only one number is specified, it must be an integer in range
    1-<max replications>; in that case, it is the run number for the only
    simulation to be executed. If a second number is specified, it must be an
    integer greater than the first number and within the same range; the two
    numbers together specify the range of run numbers for a series of
    replications. e.g., -run 20 32 will result in the execution of 13
    replications, using run numbers 20 through 32.

    If the argument(s) are valid, they are converted to integers and saved as a
    list of one or two values.
    """
    def __call__(self, parser, namespace, values, option_string=None):
        if len(values) > 2:
            msg = '-run option argument(s) must be either a single run number or a range specified by two run numbers'
            parser.error(msg)
            return

        maxrun = simconfig.get_max_replications()
        runs = []
        try:
            for value in values:
                run = int(value)
                if not (0 < run and run <= maxrun):
                    msg = 'Run numbers must be an integer in range 1-{0}'
                    parser.error(msg.format(maxrun))
                    return
                elif runs and runs[0] >= run:
                    msg = 'first -run argument must be less than the second argument'
                    parser.error(msg)
                    return
                runs.append(run)
        except ValueError:
            msg = '-run argument(s) must be integers in range 1-{0}'
            parser.error(msg.format(maxrun))

        setattr(namespace, self.dest, runs)


def _prompt(label, convert, inputfunc):
    """
    Prompt for and convert a single parameter value; raises SimError if the
    response cannot be converted.
    """
    response = inputfunc("      " + label + " => ")
    try:
        return convert(response.strip())
    except (ValueError, argparse.ArgumentTypeError) as e:
        raise SimError("Invalid Input", "{0}: {1}", label, e)


def _read_parms(inputfunc=input):
    """
    Interactively read the simulation parameters, in the order and with the
    prompts of the classic M/M/1 lab program.
    """
    from sjfsim.simulation import SimulationParameters

    print(_BANNER)
    print("      Input the following parameters:")
    meanIATime = _prompt("mean interarrival time", _positive, inputfunc)
    meanServiceTime = _prompt("mean service time", _positive, inputfunc)
    length = _prompt("length of simulation", _positiveInt, inputfunc)
    seed = _prompt("seed for the random number generator", _nonNegativeInt,
                   inputfunc)
    return SimulationParameters(meanIATime, meanServiceTime, length, seed).validate()


def runCommandLine(inargs=None, inputfunc=input):
    """
    Parses and executes the passed arguments, or sys.argv if no arguments are
    passed. (The ability to handle passed arguments, and an alternate input
    function for --prompt, exists primarily to facilitate testing.) Returns
    the process exit status.

    Options:

    -i/--interarrival:  Mean interarrival time (positive number)
    -s/--service:       Mean service (burst) time (positive number)
    -l/--length:        Simulation length in clock ticks (positive integer)
    --seed:             Random number generator seed (non-negative integer)

                        Any of the above that are not specified default to
                        the [Simulation] configuration settings.

    -p/--prompt:        Read all four parameters interactively instead
    -run:               Either the run number of the single simulation run
                        to execute, or a range of run numbers (two arguments,
                        from and to), specifying multiple replications.
                        Defaults to run 1.
    -j/--processes:     Maximum number of worker processes for replications
    -t/--theory:        Also print the queueing theory expectations
    -v/--verbosity:     Set logging level: error, warn, info or debug
                        (defaults to the [Logging] configuration setting)
    """
    desc = "Simulate a single-server queue with Shortest-Job-First scheduling"
    parser = argparse.ArgumentParser(prog='sjfsim', description=desc,
                                     usage=_USAGE)
    parser.add_argument('-i', '--interarrival', type=_positive, default=None,
                        metavar='mean',
                        help="mean interarrival time")
    parser.add_argument('-s', '--service', type=_positive, default=None,
                        metavar='mean',
                        help="mean service time")
    parser.add_argument('-l', '--length', type=_positiveInt, default=None,
                        metavar='ticks',
                        help="length of simulation, in clock ticks")
    parser.add_argument('--seed', type=_nonNegativeInt, default=None,
                        help="seed for the random number generator")
    parser.add_argument('-p', '--prompt', action='store_true',
                        help="read the simulation parameters interactively")
    parser.add_argument('-run', nargs='+', action=SimulationRunAction,
                        default=[1,],
                        help="run number to simulate, or range of run number replications")
    parser.add_argument('-j', '--processes', type=_positiveInt, default=None,
                        help="maximum number of concurrent replication processes")
    parser.add_argument('-t', '--theory', action='store_true',
                        help="print queueing theory expectations for comparison")
    parser.add_argument('-v', '--verbosity', default=None,
                        help="set logging verbosity; default is the configured level",
                        choices=['error', 'warn', 'info', 'debug'])

    args = parser.parse_args(inargs)

    try:
        _execute(args, inputfunc)
    except SimError as e:
        print("***Error -", e, file=sys.stderr)
        return 1
    return 0


def _set_verbosity(verbosity):
    """
    Set logging level based on verbosity argument, or the configured logging
    level if no verbosity was specified.
    """
    level = {'error': logging.ERROR, 'warn': logging.WARN,
             'info': logging.INFO, 'debug': logging.DEBUG}

    if verbosity:
        assert verbosity in level, "Invalid verbosity specifier"
        SimLogging.set_level(level[verbosity])
    else:
        SimLogging.set_level(simconfig.get_logging_level()[0])


def _execute(args, inputfunc):
    """
    Run the simulation (or replications) and print the report(s).
    """
    from sjfsim.simulation import Simulation, SimulationParameters
    from sjfsim.models.sjf_theory import print_theory_results

    _set_verbosity(args.verbosity)

    if args.prompt:
        parameters = _read_parms(inputfunc)
    else:
        parameters = SimulationParameters.from_configuration(args.interarrival,
                                                             args.service,
                                                             args.length,
                                                             args.seed)

    print(" Simulation time = %d units" % parameters.length)
    print(" Simulation begins...")

    if len(args.run) == 1:
        result = Simulation.execute(parameters, args.run[0])
        result.print_summary()
    else:
        assert len(args.run) == 2, "More than two run numbers in args.run"
        fromRun, toRun = args.run
        results = Simulation.replicate(parameters, fromRun, toRun,
                                       processes=args.processes)
        for result in results:
            print(" Run", result.run_number)
            result.print_summary()

    if args.theory:
        try:
            print_theory_results(parameters.mean_interarrival,
                                 parameters.mean_service)
        except SimError as e:
            print(" Queueing theory not applicable:", e)


def main():
    """
    Main entry point. Invoke runCommandLine to parse sys.argv and execute the
    parsed command.
    """
    sys.exit(runCommandLine())


if __name__ == '__main__':
    main()

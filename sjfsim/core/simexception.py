#===============================================================================
# MODULE simexception
#
# Copyright (C) 2024 Howard Klein - All Rights Reserved
#
# Defines simulation exception classes.
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
__all__ = ['SimException', 'SimError', 'EmptyTimelineError',
           'EmptyQueueError', 'InvariantViolation']


class SimException(Exception):
    """
    Base simulation exception class, with message formatting,
    derived from the built-in Exception class.

    :param name:   Exception name
    :type name:    `str`

    :param desc:   Exception description string
    :type desc:   `str`

    :param \\*args: Argument values to be substituted into the
                   description string.

    """
    def __init__(self, name, desc='', *args):
        super().__init__(name, desc, *args)
        self.name_ = name
        try:
            self.desc_ = desc.format(*args)
        except IndexError:
            self.desc_ = desc + " (Insufficient number of description parameters)"


class SimError(SimException):
    """
    Subclass of SimException for simulation errors.
    """
    def __str__(self):
        return 'SimException Error (' + self.name_ +'): ' + self.desc_


class EmptyTimelineError(SimError):
    """
    Raised when the earliest event is requested from an empty event timeline.
    A well-formed run always has its end-of-simulation event pending until
    that event is processed, so this indicates a lost or doubly-consumed
    event.
    """
    def __init__(self, desc='Event list underflow', *args):
        super().__init__('EmptyTimeline', desc, *args)


class EmptyQueueError(SimError):
    """
    Raised when the shortest job is requested from an empty ready queue.
    The driver only dequeues after confirming the queue is non-empty.
    """
    def __init__(self, desc='Ready queue underflow', *args):
        super().__init__('EmptyQueue', desc, *args)


class InvariantViolation(SimError):
    """
    Raised when an ordered insert cannot find its insertion point, i.e. the
    sort order of the event timeline or ready queue has been broken.
    """
    def __init__(self, desc='Sort invariant violated', *args):
        super().__init__('InvariantViolation', desc, *args)

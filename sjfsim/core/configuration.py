#===============================================================================
# MODULE configuration
#
# Copyright (C) 2024 Howard Klein - All Rights Reserved
#
# Defines the SimConfigParser class and related functions. The functions are
# the primary public interface; they access a SimConfigParser singleton that
# is created when this module is loaded and reads its files on first use.
#===============================================================================
import os, configparser, logging
from sjfsim.core.simexception import SimError
from sjfsim.core.simlogging import SimLogging

logger = SimLogging.get_logger(__name__)

_SJFSIM_CFG_BASENAME = 'sjfsim.ini'
_CONFIG_PATH_ENV_VARNAME = 'SJFSIM_CONFIG'

# Configuration .ini file section names
_SIMULATION = 'Simulation'
_LOGGING = 'Logging'
_SIM_RANDOM = 'SimRandom'

_ERROR_NAME = 'SimConfiguration Error'


class SimConfigParser(configparser.ConfigParser):
    """
    A subclass of ConfigParser that overloads the :meth:`getint` and
    :meth:`getfloat` methods and provides an additional :meth:`getstring`
    method. Also implements a :meth:`read_files` method that reads the
    sjfsim .ini configuration files; these files are read on the first
    attempt by client code to obtain a configuration setting.

    All of these methods raise SimError exceptions (in place of the exceptions
    raised by the default ConfigParser). :meth:`getint` and :meth:`getfloat`
    add the ability to specify the minimum and/or maximum valid values.
    :meth:`getstring` validates the string setting value against an iterable
    of valid string values.

    Configuration Files:

    :meth:`read_files` reads up to three configuration files (if they exist)
    in the following order:

      - sjfsim.ini in the sjfsim installation directory
      - sjfsim.ini in the caller's working directory
      - the file named by environment variable SJFSIM_CONFIG

    Setting values in later-read files supercede those from earlier-read
    files. The last path may also be set explicitly via
    :func:`set_config_path`, before any setting is read.
    """
    def __init__(self):
        super().__init__()
        self._initialized = False
        self._config_path = os.environ.get(_CONFIG_PATH_ENV_VARNAME)

    def _initialize(self):
        """
        If not initialized, read the configuration file(s)
        """
        if self._initialized:
            return
        self.read_files()
        self._initialized = True

    def set_config_path(self, path):
        """
        Set the path of an additional configuration file. Raises if the
        configuration files have already been read.
        """
        if self._initialized:
            msg = "SimConfiguration - cannot set configuration file to {0} after configuration files have been read"
            raise SimError(_ERROR_NAME, msg, path)
        self._config_path = path

    def getint(self, section, option, minvalue=None, maxvalue=None, **kwargs):
        """
        Gets and returns an integer setting value.
        """
        self._initialize()
        strvalue = None
        try:
            strvalue = self.get(section, option, **kwargs)
            value = super().getint(section, option, **kwargs)
        except ValueError:
            msg = "SimConfiguration {0} {1} setting ({2}) must be an integer"
            raise SimError(_ERROR_NAME, msg, section, option, strvalue)
        except Exception as e:
            msg = "Error reading SimConfiguration setting {0} {1}: {2}"
            raise SimError(_ERROR_NAME, msg, section, option, e)

        self._validate_range(section, option, value, minvalue, maxvalue)
        return value

    def getfloat(self, section, option, minvalue=None, maxvalue=None,
                 **kwargs):
        """
        Gets and returns a float setting value. minvalue, if specified, is an
        exclusive lower bound (settings such as mean times must be strictly
        positive).
        """
        self._initialize()
        strvalue = None
        try:
            strvalue = self.get(section, option, **kwargs)
            value = super().getfloat(section, option, **kwargs)
        except ValueError:
            msg = "SimConfiguration {0} {1} setting ({2}) must be a number"
            raise SimError(_ERROR_NAME, msg, section, option, strvalue)
        except Exception as e:
            msg = "Error reading SimConfiguration setting {0} {1}: {2}"
            raise SimError(_ERROR_NAME, msg, section, option, e)

        if minvalue is not None and value <= minvalue:
            msg = "SimConfiguration {0} {1} setting ({3}) must be greater than {2}"
            raise SimError(_ERROR_NAME, msg, section, option, minvalue, value)
        self._validate_range(section, option, value, None, maxvalue)
        return value

    @staticmethod
    def _validate_range(section, option, value, minvalue, maxvalue):
        if minvalue is not None and value < minvalue:
            msg = "SimConfiguration {0} {1} setting ({3}) cannot be less than {2}"
            raise SimError(_ERROR_NAME, msg, section, option, minvalue, value)
        if maxvalue is not None and value > maxvalue:
            msg = "SimConfiguration {0} {1} setting ({3}) cannot be greater than {2}"
            raise SimError(_ERROR_NAME, msg, section, option, maxvalue, value)

    def getstring(self, section, option, valid_values, **kwargs):
        """
        Get and return a string setting value, after validating that
        value against a passed iterable of valid values. The validation
        is case-insensitive, and the value is returned lowercase.
        """
        self._initialize()
        try:
            value = self.get(section, option, **kwargs)
        except Exception as e:
            msg = "Error reading SimConfiguration setting {0} {1}: {2}"
            raise SimError(_ERROR_NAME, msg, section, option, e)

        lvalue = value.lower()
        if lvalue in valid_values:
            return lvalue
        else:
            msg = "SimConfiguration {0} {1} setting ({2}) must be one of: {3}"
            raise SimError(_ERROR_NAME, msg, section, option, value,
                           tuple(valid_values))

    def read_files(self):
        """
        Read (if they exist) the installation, working directory and
        explicitly designated configuration files, in that order.
        """
        install_dir = os.path.split(os.path.dirname(__file__))[0]
        install_cfg_filename = os.path.join(install_dir, _SJFSIM_CFG_BASENAME)
        local_cfg_filename = os.path.join(os.getcwd(), _SJFSIM_CFG_BASENAME)

        cfg_files = [install_cfg_filename, local_cfg_filename]
        if self._config_path:
            cfg_files.append(os.path.abspath(self._config_path))

        # Eliminate duplicates while maintaining order
        cfg_files = list(dict.fromkeys(cfg_files))

        try:
            files_read = self.read(cfg_files)
        except Exception as e:
            msg = "Error parsing one or more sjfsim configuration files {0}: {1}"
            raise SimError(_ERROR_NAME, msg, cfg_files, e)

        if files_read:
            logger.info("Configuration files processed: %s", files_read)
        if self._config_path and os.path.abspath(self._config_path) not in files_read:
            logger.warning("Configuration file %s not found", self._config_path)


def _init():
    """
    Create a SimConfigParser singleton instance. The configuration files
    will be read lazily, on first request for a setting value.
    """
    config = SimConfigParser()
    return config

_config = _init()

def set_config_path(path):
    """
    Designate an additional configuration file. Raises if called after the
    configuration is read/initialized.
    """
    _config.set_config_path(path)

#===============================================================================
# Simulation parameter setting accessors
#===============================================================================
def get_mean_interarrival_time():
    """
    Return the default mean interarrival time (a positive real)
    """
    return _config.getfloat(_SIMULATION, 'MeanInterarrivalTime', minvalue=0.0,
                            fallback=5.0)

def get_mean_service_time():
    """
    Return the default mean service (burst) time (a positive real)
    """
    return _config.getfloat(_SIMULATION, 'MeanServiceTime', minvalue=0.0,
                            fallback=3.0)

def get_simulation_length():
    """
    Return the default simulation length, in clock ticks
    """
    return _config.getint(_SIMULATION, 'Length', minvalue=1, fallback=1000)

def get_seed():
    """
    Return the default random number generator seed
    """
    return _config.getint(_SIMULATION, 'Seed', minvalue=0, fallback=1)

#===============================================================================
# SimLogging setting accessors
#===============================================================================
def get_logging_level():
    """
    Return the the logging level setting, converted from string to a
    logging module flag value.
    """
    logging_level = {'debug': logging.DEBUG,
                     'info': logging.INFO,
                     'warning': logging.WARNING,
                     'error': logging.ERROR,
                     'critical': logging.CRITICAL}
    valid_values = logging_level.keys()

    levelstr = _config.getstring(_LOGGING, 'level', valid_values,
                                 fallback='warning')
    return logging_level[levelstr], levelstr

#===============================================================================
# SimRandom setting accessors
#===============================================================================
def get_max_replications():
    """
    Return the maximum number of replications to support - the same as the
    maximum run number.
    """
    return _config.getint(_SIM_RANDOM, 'MaxReplications', minvalue=1,
                          fallback=100)

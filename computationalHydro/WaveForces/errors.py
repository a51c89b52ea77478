# -- Wave Force Errors -- #

'''
Exception types raised by the wave excitation force core.

None of these are retried internally: each aborts the operation that
raised it (initialization or a single force evaluation) and propagates
to the caller.
'''


class WaveForcesError(Exception):
    '''Base class for all wave excitation force errors.'''


class ConfigurationError(WaveForcesError, RuntimeError):
    '''
    Required inputs are missing for the requested quantity.

    Raised e.g. when the spectrum is queried before wave height and
    period were provided, or forces are requested before the free
    surface elevation exists.
    '''


class DataFormatError(WaveForcesError, ValueError):
    '''Elevation file missing, unreadable, or not in `<time> : <eta>` form.'''


class DomainError(WaveForcesError, ValueError):
    '''Convolution query time falls outside the precomputed free surface window.'''

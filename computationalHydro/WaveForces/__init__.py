# -- WaveForces Package -- #

'''
Time-domain hydrodynamic excitation forces on floating bodies.

Still water, regular waves (closed-form from frequency-domain
coefficients) and irregular seas (impulse response convolution against a
random-phase free surface history), for use by an external rigid-body
dynamics loop.
'''

__version__ = '0.1.0'

from computationalHydro.WaveForces.config import (
    IrregularWaveParams,
    RegularWaveParams,
    WaveForceConfig,
    WaveMode,
)
from computationalHydro.WaveForces.errors import (
    ConfigurationError,
    DataFormatError,
    DomainError,
    WaveForcesError,
)
from computationalHydro.WaveForces.forces.waveTypes import (
    IrregularWaves,
    NoWave,
    RegularWave,
    createWaveForceProvider,
)
from computationalHydro.WaveForces.hydrodynamics.excitationTable import (
    IrregularWaveInfo,
    RegularWaveInfo,
    SimulationParameters,
)

# -- Hydrodynamics Subpackage -- #

'''
Excitation coefficient tables, impulse response resampling and the
excitation convolution.
'''

from computationalHydro.WaveForces.hydrodynamics.excitationTable import (
    ExcitationTable,
    IrregularWaveInfo,
    RegularWaveInfo,
    SimulationParameters,
    computeIntegrationWidths,
)
from computationalHydro.WaveForces.hydrodynamics.irfResampler import (
    resampleExcitationTables,
    resampleImpulseResponse,
    resampledTimeGrid,
)
from computationalHydro.WaveForces.hydrodynamics.convolution import ConvolutionEngine, interpolateElevation

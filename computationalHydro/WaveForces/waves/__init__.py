# -- Waves Subpackage -- #

'''
Sea state models: dispersion relation, parametric spectra and
random-phase free surface synthesis.
'''

from computationalHydro.WaveForces.waves.dispersion import computeWaveNumbers, solveWaveNumber, dispersionResidual
from computationalHydro.WaveForces.waves.spectrum import (
    WaveSpectrum,
    createSpectrum,
    jonswapSpectrumHz,
    piersonMoskowitzSpectrumHz,
    spectrumFrequencies,
)
from computationalHydro.WaveForces.waves.freeSurface import (
    FreeSurfaceHistory,
    WaveComponents,
    applyRamp,
    buildFreeSurfaceHistory,
    freeSurfaceMesh,
    freeSurfaceTimeWindow,
    randomPhaseComponents,
    synthesizeFreeSurfaceElevation,
)

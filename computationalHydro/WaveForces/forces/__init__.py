# -- Wave Forces Subpackage -- #

'''
Wave excitation force variants (still water, regular, irregular)
behind a single getForceAtTime() protocol.
'''

from computationalHydro.WaveForces.forces.protocols import WaveForceProvider
from computationalHydro.WaveForces.forces.waveTypes import (
    IrregularWaves,
    NoWave,
    RegularWave,
    createWaveForceProvider,
)

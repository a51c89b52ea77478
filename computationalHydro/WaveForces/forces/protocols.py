# -- Wave Force Provider Protocol -- #

'''
Interface shared by the still-water, regular and irregular wave force
variants. The external dynamics loop only ever calls getForceAtTime().
'''

from __future__ import annotations

from typing import Protocol

import numpy as np

from computationalHydro.WaveForces.config import WaveMode


class WaveForceProvider(Protocol):
    '''Protocol for wave excitation force variants.'''

    @property
    def mode(self) -> WaveMode:
        '''Which wave variant this provider implements.'''
        ...

    @property
    def numBodies(self) -> int:
        '''Number of bodies the force vector covers.'''
        ...

    def getForceAtTime(self, t: float) -> np.ndarray:
        '''
        Excitation forces at simulation time t.

        Returns a freshly allocated vector of length 6 * numBodies laid
        out as [body0 surge..yaw, body1 surge..yaw, ...].
        '''
        ...

# -- Shared Test Fixtures -- #

'''
Fixtures shared by the WaveForces tests.
'''

import numpy as np
import pytest

from computationalHydro.WaveForces.hydrodynamics.excitationTable import IrregularWaveInfo


class InMemoryTextFilePort:
    '''TextFilePort keeping files in a dict.'''

    def __init__(self, files: dict[str, str] | None = None) -> None:
        self.files: dict[str, str] = dict(files or {})

    def readText(self, path: str) -> str:
        if path not in self.files:
            raise FileNotFoundError(path)
        return self.files[path]

    def writeText(self, path: str, text: str) -> None:
        self.files[path] = text


@pytest.fixture
def memoryPort() -> InMemoryTextFilePort:
    return InMemoryTextFilePort()


@pytest.fixture
def decayingIrf() -> IrregularWaveInfo:
    '''Smooth two-second impulse response, distinct per DOF.'''
    irfTime = np.linspace(-1.0, 2.0, 13)
    dofScale = np.arange(1, 7)[:, np.newaxis]
    irfValues = dofScale * np.exp(-irfTime ** 2) * np.cos(2.0 * irfTime)
    return IrregularWaveInfo(excitationIrfMatrix=irfValues, excitationIrfTime=irfTime)

# -- Excitation Table Tests -- #

'''
Frequency-domain interpolation and impulse response bookkeeping.
'''

import numpy as np
import pytest

from computationalHydro.WaveForces.errors import ConfigurationError
from computationalHydro.WaveForces.hydrodynamics.excitationTable import (
    ExcitationTable,
    IrregularWaveInfo,
    RegularWaveInfo,
    computeIntegrationWidths,
)


def makeRegularInfo(magRow=(1.0, 2.0, 3.0, 4.0), phaseRow=(0.0, 0.1, 0.2, 0.3)):
    freqList = np.array([0.5, 1.0, 1.5, 2.0])
    magnitude = np.tile(np.asarray(magRow, dtype=float), (6, 1))
    phase = np.tile(np.asarray(phaseRow, dtype=float), (6, 1))
    return RegularWaveInfo(freqList=freqList, excitationMagMatrix=magnitude, excitationPhaseMatrix=phase)


######################################################################
# -- Integration Widths -- #
######################################################################

def testUniformWidths():
    widths = computeIntegrationWidths(np.linspace(0.0, 2.0, 5))
    assert np.allclose(widths, [0.25, 0.5, 0.5, 0.5, 0.25])


def testNonUniformWidthsSumToSpan():
    t = np.array([-1.0, -0.2, 0.0, 0.7, 3.0])
    widths = computeIntegrationWidths(t)

    assert widths[0] == pytest.approx(0.4)
    assert widths[2] == pytest.approx(0.45)
    assert widths.sum() == pytest.approx(4.0)


def testSingleSampleWidthIsZero():
    assert computeIntegrationWidths(np.array([0.0])).tolist() == [0.0]


######################################################################
# -- Frequency Domain -- #
######################################################################

def testFrequencyIndexOnUniformGrid():
    '''On a grid starting at d_omega the index is omega / d_omega - 1.'''
    table = ExcitationTable.fromRegularWaveInfo(makeRegularInfo())
    for omega in [0.5, 0.8, 1.25, 2.0]:
        assert table.frequencyIndex(omega) == pytest.approx(omega / 0.5 - 1.0)


def testFractionalInterpolation():
    table = ExcitationTable.fromRegularWaveInfo(makeRegularInfo())
    magnitude, phase = table.interpolateExcitation(2, table.frequencyIndex(1.25))

    assert magnitude == pytest.approx(2.5)
    assert phase == pytest.approx(0.15)


def testExactBinAndLastBin():
    table = ExcitationTable.fromRegularWaveInfo(makeRegularInfo())
    assert table.interpolateExcitation(0, 1.0) == pytest.approx((2.0, 0.1))
    assert table.interpolateExcitation(0, 3.0) == pytest.approx((4.0, 0.3))


@pytest.mark.parametrize('omega', [0.2, 2.5])
def testOutOfRangeFrequencyRaises(omega):
    table = ExcitationTable.fromRegularWaveInfo(makeRegularInfo())
    with pytest.raises(ConfigurationError):
        table.frequencyIndex(omega)


def testDirectionColumns():
    magnitude = np.zeros((6, 2, 4))
    magnitude[:, 1, :] = 7.0
    info = RegularWaveInfo(
        freqList=np.array([0.5, 1.0, 1.5, 2.0]),
        excitationMagMatrix=magnitude,
        excitationPhaseMatrix=np.zeros((6, 2, 4)),
    )
    table = ExcitationTable.fromRegularWaveInfo(info)

    assert table.numDirections == 2
    assert table.interpolateExcitation(4, 1.5, directionIndex=0)[0] == 0.0
    assert table.interpolateExcitation(4, 1.5, directionIndex=1)[0] == 7.0


def testMismatchedShapesRejected():
    info = RegularWaveInfo(
        freqList=np.array([0.5, 1.0, 1.5]),
        excitationMagMatrix=np.ones((6, 4)),
        excitationPhaseMatrix=np.ones((6, 4)),
    )
    with pytest.raises(ValueError):
        ExcitationTable.fromRegularWaveInfo(info)


######################################################################
# -- Time Domain -- #
######################################################################

def testImpulseResponseTableIsReadOnly():
    info = IrregularWaveInfo(
        excitationIrfMatrix=np.ones((6, 3)),
        excitationIrfTime=np.array([0.0, 0.5, 1.0]),
    )
    table = ExcitationTable.fromIrregularWaveInfo(info)

    assert table.hasImpulseResponse
    assert not table.hasFrequencyData
    assert table.irfTimeSpan == (0.0, 1.0)
    assert np.allclose(table.irfWidths, [0.25, 0.5, 0.25])
    with pytest.raises(ValueError):
        table.irfValues[0, 0] = 2.0


def testReplaceImpulseResponseUpdatesWidths():
    table = ExcitationTable.fromIrregularWaveInfo(IrregularWaveInfo(
        excitationIrfMatrix=np.ones((6, 3)),
        excitationIrfTime=np.array([0.0, 0.5, 1.0]),
    ))
    table.replaceImpulseResponse(np.linspace(0.0, 1.0, 5), np.zeros((6, 5)))

    assert table.irfTime.size == 5
    assert table.irfWidths.sum() == pytest.approx(1.0)


@pytest.mark.parametrize('time, values', [
    (np.array([0.0, 0.0, 1.0]), np.ones((6, 3))),
    (np.array([0.0, 1.0]), np.ones((5, 2))),
    (np.array([]), np.ones((6, 0))),
])
def testInvalidImpulseResponseRejected(time, values):
    with pytest.raises(ValueError):
        ExcitationTable.fromIrregularWaveInfo(IrregularWaveInfo(excitationIrfMatrix=values, excitationIrfTime=time))


def testMissingDataRaises():
    table = ExcitationTable.fromRegularWaveInfo(makeRegularInfo())
    with pytest.raises(ConfigurationError):
        table.irfTime

    irfTable = ExcitationTable.fromIrregularWaveInfo(IrregularWaveInfo(
        excitationIrfMatrix=np.ones((6, 2)), excitationIrfTime=np.array([0.0, 1.0]),
    ))
    with pytest.raises(ConfigurationError):
        irfTable.frequencyIndex(1.0)

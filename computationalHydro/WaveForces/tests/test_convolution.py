# -- Excitation Convolution Tests -- #

'''
Impulse response convolution against a precomputed elevation history.
'''

import numpy as np
import pytest

from computationalHydro.WaveForces.errors import DomainError
from computationalHydro.WaveForces.hydrodynamics.convolution import (
    ConvolutionEngine,
    bracketIndices,
    interpolateElevation,
)
from computationalHydro.WaveForces.hydrodynamics.excitationTable import ExcitationTable, IrregularWaveInfo
from computationalHydro.WaveForces.waves.freeSurface import FreeSurfaceHistory


@pytest.fixture
def stepHistory():
    return FreeSurfaceHistory(
        time=np.array([0.0, 1.0, 2.0, 3.0]),
        elevation=np.array([0.0, 1.0, -2.0, 0.5]),
    )


def makeTable(irfTime, irfValues):
    return ExcitationTable.fromIrregularWaveInfo(
        IrregularWaveInfo(excitationIrfMatrix=np.asarray(irfValues), excitationIrfTime=np.asarray(irfTime))
    )


######################################################################
# -- Interpolation -- #
######################################################################

def testExactSamplesReturnElevation(stepHistory):
    '''Hits on stored samples (including both ends) return elevations, not times.'''
    eta = interpolateElevation(stepHistory, np.array([0.0, 1.0, 2.0, 3.0]))
    assert eta.tolist() == [0.0, 1.0, -2.0, 0.5]


def testInteriorInterpolation(stepHistory):
    eta = interpolateElevation(stepHistory, np.array([0.5, 1.5, 2.75]))
    assert np.allclose(eta, [0.5, -0.5, -0.125])


@pytest.mark.parametrize('t', [-0.01, 3.01])
def testOutsideWindowRaises(stepHistory, t):
    with pytest.raises(DomainError, match='outside the precomputed window'):
        interpolateElevation(stepHistory, np.array([1.0, t]))


def testBracketClampedAtLastSample():
    idx = bracketIndices(np.array([0.0, 1.0, 2.0]), np.array([0.0, 0.5, 1.0, 2.0]))
    assert idx.tolist() == [0, 0, 1, 1]


######################################################################
# -- Forces -- #
######################################################################

def testSingleWeightedSample(stepHistory):
    '''With one non-zero IRF lag at tau=0 the force is v * eta(t) * w.'''
    values = np.zeros((6, 2))
    values[:, 0] = np.arange(1, 7)
    table = makeTable([0.0, 0.5], values)
    engine = ConvolutionEngine([table], stepHistory)

    w = table.irfWidths[0]
    assert w == pytest.approx(0.25)
    for dof in range(6):
        assert engine.forceAt(0, dof, 2.0) == pytest.approx((dof + 1) * -2.0 * w)
        assert engine.forceAt(0, dof, 1.5) == pytest.approx((dof + 1) * -0.5 * w)


def testMatchesDirectSum():
    rng = np.random.default_rng(11)
    historyTime = np.linspace(-5.0, 25.0, 601)
    history = FreeSurfaceHistory(time=historyTime, elevation=rng.normal(size=historyTime.size))

    irfTime = np.linspace(-2.0, 4.0, 37)
    irfValues = rng.normal(size=(6, irfTime.size))
    table = makeTable(irfTime, irfValues)
    engine = ConvolutionEngine([table], history)

    for t in [0.0, 3.33, 12.0, 20.9]:
        eta = np.interp(t - irfTime, historyTime, history.elevation)
        expected = irfValues @ (eta * table.irfWidths)
        assert np.allclose(engine.bodyForceAt(0, t), expected, rtol=1e-10, atol=1e-12)


def testLagLeavingWindowRaises(stepHistory):
    table = makeTable([0.0, 0.5], np.ones((6, 2)))
    engine = ConvolutionEngine([table], stepHistory)

    # t - 0.5 < 0 at the start of the window
    with pytest.raises(DomainError):
        engine.bodyForceAt(0, 0.2)
    with pytest.raises(DomainError):
        engine.forceAt(0, 3, 3.4)


def testForceAtTimeZeroFillsOtherBodies(stepHistory):
    tables = [makeTable([0.0, 0.5], np.ones((6, 2))), makeTable([0.0, 0.5], 2.0 * np.ones((6, 2)))]
    engine = ConvolutionEngine(tables, stepHistory)

    forces = engine.forceAtTime(1, 2.0)
    assert forces.shape == (12,)
    assert np.all(forces[:6] == 0.0)
    assert np.allclose(forces[6:], engine.bodyForceAt(1, 2.0))
    assert engine.numBodies == 2


def testCallsAreIndependent(stepHistory):
    '''Query order does not change results.'''
    table = makeTable([0.0, 0.5], np.ones((6, 2)))
    engine = ConvolutionEngine([table], stepHistory)

    forward = [engine.forceAt(0, 0, t) for t in [0.5, 1.7, 2.9]]
    backward = [engine.forceAt(0, 0, t) for t in [2.9, 1.7, 0.5]][::-1]
    assert forward == backward

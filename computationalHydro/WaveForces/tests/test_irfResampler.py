# -- Impulse Response Resampling Tests -- #

'''
Spline re-gridding of excitation IRFs onto the simulation step.
'''

import math

import numpy as np
import pytest

from computationalHydro.WaveForces.hydrodynamics.excitationTable import ExcitationTable, IrregularWaveInfo
from computationalHydro.WaveForces.hydrodynamics.irfResampler import (
    resampleExcitationTables,
    resampleImpulseResponse,
    resampledTimeGrid,
)


def cubicIrf(t):
    '''Per-DOF cubic polynomials in t, shape (6, len(t)).'''
    return np.array([(dof + 1) * t ** 3 - t + dof for dof in range(6)])


def testEndpointsPreservedAndCount():
    grid = resampledTimeGrid(-2.0, 10.0, 0.25)
    assert grid[0] == -2.0
    assert grid[-1] == 10.0
    assert grid.size == math.ceil(12.0 / 0.25)


def testSpacingCloseToDt():
    dt = 0.1
    grid = resampledTimeGrid(0.0, 10.0, dt)
    spacing = np.diff(grid)

    assert np.allclose(spacing, spacing[0])
    # ceil() of the sample count makes the step slightly larger than dt
    assert spacing[0] >= dt - 1e-12
    assert spacing[0] <= dt * 10.0 / (10.0 - dt) + 1e-12


def testCubicReproducedExactly():
    timeOld = np.linspace(0.0, 10.0, 21)
    timeNew, valuesNew = resampleImpulseResponse(timeOld, cubicIrf(timeOld), 0.1)

    assert valuesNew.shape == (6, timeNew.size)
    assert np.allclose(valuesNew, cubicIrf(timeNew), rtol=1e-9, atol=1e-6)


def testNonUniformSourceGrid():
    timeOld = np.array([-1.0, -0.4, 0.0, 0.3, 1.1, 2.0, 2.2, 3.0])
    timeNew, valuesNew = resampleImpulseResponse(timeOld, cubicIrf(timeOld), 0.05)

    assert timeNew[0] == -1.0
    assert timeNew[-1] == 3.0
    assert np.allclose(valuesNew, cubicIrf(timeNew), rtol=1e-9, atol=1e-6)


def testShortTableLowersDegree():
    timeOld = np.array([0.0, 1.0])
    values = np.array([[0.0, 2.0]] * 6)
    timeNew, valuesNew = resampleImpulseResponse(timeOld, values, 0.25)

    assert np.allclose(valuesNew[0], 2.0 * timeNew)


def testSingleSampleKeptAsIs():
    timeNew, valuesNew = resampleImpulseResponse(np.array([0.0]), np.full((6, 1), 3.0), 0.1)
    assert timeNew.tolist() == [0.0]
    assert np.array_equal(valuesNew, np.full((6, 1), 3.0))


def testTablesResampledTogether():
    timeOld = np.linspace(0.0, 4.0, 9)
    table = ExcitationTable.fromIrregularWaveInfo(
        IrregularWaveInfo(excitationIrfMatrix=cubicIrf(timeOld), excitationIrfTime=timeOld)
    )
    resampleExcitationTables([table], 0.1)

    assert table.irfTime.size == math.ceil(4.0 / 0.1)
    assert table.irfValues.shape == (6, table.irfTime.size)
    assert table.irfWidths.sum() == pytest.approx(4.0)


def testNonPositiveDtKeepsNativeSampling():
    timeOld = np.linspace(0.0, 4.0, 9)
    table = ExcitationTable.fromIrregularWaveInfo(
        IrregularWaveInfo(excitationIrfMatrix=cubicIrf(timeOld), excitationIrfTime=timeOld)
    )
    before = table.irfTime
    resampleExcitationTables([table], 0.0)
    assert table.irfTime is before

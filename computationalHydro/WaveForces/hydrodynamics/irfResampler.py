# -- Impulse Response Resampling -- #

'''
Re-grid excitation impulse responses onto the simulation time step.

The new lag grid keeps the original first and last lag exactly and uses
ceil((t1 - t0) / dt) evenly spaced samples. All six DOF columns are fit
with one vector-valued degree-3 interpolating spline over the
[0, 1]-normalized original lag grid and evaluated on the normalized new
grid. Values, lag grid and integration widths are replaced together.
'''

from __future__ import annotations

import logging
import math
from typing import Iterable

import numpy as np
from scipy.interpolate import make_interp_spline

from computationalHydro.WaveForces.hydrodynamics.excitationTable import ExcitationTable

logger = logging.getLogger(__name__)

# Spline degree used for resampling
SPLINE_DEGREE = 3


def resampledTimeGrid(t0: float, t1: float, dt: float) -> np.ndarray:
    '''
    Evenly spaced lag grid from t0 to t1 inclusive with step close to dt.

    Parameters:
    -----------
    t0 : float
        First lag [s]
    t1 : float
        Last lag [s]
    dt : float
        Requested step [s], positive

    Returns:
    --------
    np.ndarray : ceil((t1 - t0) / dt) samples (at least two)
    '''
    numSamples = max(2, int(math.ceil((t1 - t0) / dt)))
    return np.linspace(t0, t1, numSamples)


def resampleImpulseResponse(
    irfTime: np.ndarray,
    irfValues: np.ndarray,
    dt: float,
) -> tuple[np.ndarray, np.ndarray]:
    '''
    Resample an IRF matrix onto a uniform lag grid.

    Parameters:
    -----------
    irfTime : np.ndarray
        Original ascending lag grid [s], shape (nOld,)
    irfValues : np.ndarray
        IRF values, shape (nDof, nOld)
    dt : float
        Requested lag step [s]

    Returns:
    --------
    tuple[np.ndarray, np.ndarray] : (new lag grid, new values of shape (nDof, nNew))
    '''
    timeOld = np.asarray(irfTime, dtype=float)
    valuesOld = np.asarray(irfValues, dtype=float)

    # A single lag has no span to resample over
    if timeOld.size == 1:
        return timeOld.copy(), valuesOld.copy()

    t0, t1 = timeOld[0], timeOld[-1]
    timeNew = resampledTimeGrid(t0, t1, dt)

    span = t1 - t0
    xOld = (timeOld - t0) / span
    xNew = (timeNew - t0) / span

    # Short tables cannot support a cubic; fall back to the highest degree they can
    degree = min(SPLINE_DEGREE, timeOld.size - 1)
    spline = make_interp_spline(xOld, valuesOld.T, k=degree)
    valuesNew = spline(xNew).T

    return timeNew, valuesNew


def resampleExcitationTables(tables: Iterable[ExcitationTable], dt: float) -> None:
    '''
    Resample every body's impulse response in place.

    Skipped entirely when dt is non-positive (native sampling is kept).

    Parameters:
    -----------
    tables : Iterable[ExcitationTable]
        One table per body
    dt : float
        Simulation time step [s]
    '''
    if dt <= 0.0:
        return

    for bodyIndex, table in enumerate(tables):
        timeNew, valuesNew = resampleImpulseResponse(table.irfTime, table.irfValues, dt)
        logger.debug(
            'Resampled excitation IRF of body %d from %d to %d samples (dt=%g)',
            bodyIndex, table.irfTime.size, timeNew.size, dt,
        )
        table.replaceImpulseResponse(timeNew, valuesNew)

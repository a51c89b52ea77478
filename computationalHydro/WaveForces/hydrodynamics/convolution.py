# -- Excitation Convolution -- #

'''
Irregular-wave excitation force as a causal convolution.

    f_ex(t) = sum_j IRF[dof, j] * eta(t - tau_j) * w_j

eta is linearly interpolated from the precomputed FreeSurfaceHistory at
each shifted time t - tau_j. Every shifted time must lie inside the
history window; otherwise the whole evaluation fails with DomainError
and no partial force is returned. Values are never clamped to the window
edges.

The bracket search is stateless (binary search on the history times), so
calls are independent of each other and safe to run for different bodies
concurrently against the shared read-only tables.
'''

from __future__ import annotations

from typing import Sequence

import numpy as np

from computationalHydro.WaveForces import constants as c
from computationalHydro.WaveForces.errors import DomainError
from computationalHydro.WaveForces.hydrodynamics.excitationTable import ExcitationTable
from computationalHydro.WaveForces.waves.freeSurface import FreeSurfaceHistory


def bracketIndices(historyTime: np.ndarray, queryTimes: np.ndarray) -> np.ndarray:
    '''
    Lower index of the history interval containing each query time.

    Returns idx with historyTime[idx] <= t <= historyTime[idx + 1]; the
    index is clamped to [0, n - 2] so the upper neighbour always exists.
    Query times must already be inside the history window.
    '''
    idx = np.searchsorted(historyTime, queryTimes, side='right') - 1
    return np.clip(idx, 0, historyTime.size - 2)


def interpolateElevation(history: FreeSurfaceHistory, queryTimes: np.ndarray) -> np.ndarray:
    '''
    Free surface elevation at arbitrary times inside the history window.

    Exact sample hits return the stored elevation; interior points are
    linearly interpolated between the two bracketing elevations.

    Raises:
    -------
    DomainError : If any query time lies outside the history window
    '''
    t = np.asarray(queryTimes, dtype=float)
    tMin, tMax = history.startTime, history.endTime

    outside = (t < tMin) | (t > tMax)
    if np.any(outside):
        badTime = float(t[outside][0])
        raise DomainError(
            f'Excitation convolution: free surface elevation requested at t={badTime:.6f}, '
            f'outside the precomputed window [{tMin:.6f}, {tMax:.6f}]'
        )

    idx = bracketIndices(history.time, t)
    t1 = history.time[idx]
    t2 = history.time[idx + 1]
    eta1 = history.elevation[idx]
    eta2 = history.elevation[idx + 1]

    w2 = (t - t1) / (t2 - t1)
    return (1.0 - w2) * eta1 + w2 * eta2


class ConvolutionEngine:
    '''
    Evaluates excitation forces from impulse responses and a free surface history.

    Holds references to the shared tables only; no per-call state.

    Parameters:
    -----------
    tables : Sequence[ExcitationTable]
        One impulse-response table per body
    history : FreeSurfaceHistory
        Precomputed free surface elevation
    '''

    def __init__(self, tables: Sequence[ExcitationTable], history: FreeSurfaceHistory) -> None:
        self._tables = list(tables)
        self._history = history

    @property
    def numBodies(self) -> int:
        return len(self._tables)

    @property
    def history(self) -> FreeSurfaceHistory:
        return self._history

    def _weightedElevation(self, table: ExcitationTable, t: float) -> np.ndarray:
        '''eta(t - tau_j) * w_j for every IRF sample of a body.'''
        eta = interpolateElevation(self._history, t - table.irfTime)
        return eta * table.irfWidths

    def forceAt(self, body: int, dof: int, t: float) -> float:
        '''
        Excitation force of one DOF of one body at time t.

        Parameters:
        -----------
        body : int
            Body index
        dof : int
            Degree of freedom 0..5
        t : float
            Simulation time [s]

        Returns:
        --------
        float : Force (or moment) contribution
        '''
        table = self._tables[body]
        return float(np.dot(table.irfValues[dof], self._weightedElevation(table, t)))

    def bodyForceAt(self, body: int, t: float) -> np.ndarray:
        '''Six-DOF excitation vector of one body at time t.'''
        table = self._tables[body]
        return table.irfValues @ self._weightedElevation(table, t)

    def forceAtTime(self, body: int, t: float) -> np.ndarray:
        '''
        Full 6*numBodies vector with only the given body's slots filled.

        Returns:
        --------
        np.ndarray : Fresh force vector, zeros outside the body's slots
        '''
        forces = np.zeros(c.dofsPerBody * self.numBodies)
        offset = c.dofsPerBody * body
        forces[offset:offset + c.dofsPerBody] = self.bodyForceAt(body, t)
        return forces

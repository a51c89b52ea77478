# -- Linear Wave Dispersion Relation -- #

'''
Wavenumber solver for the linear (Airy) dispersion relation.

    omega^2 = g * k * tanh(k * d)

Solved per angular frequency with Newton iteration from the deep-water
guess k0 = omega^2 / g. The iteration uses the slope

    f'(k) = -2*g*tanh(k*d) - g*k*d*(1 - tanh^2(k*d))

which converges to the same root as the exact derivative (linearly rather
than quadratically). Non-convergence is not an error: the last iterate
is returned and callers needing guaranteed accuracy should check
dispersionResidual() themselves.

References:
-----------
Dean, R.G. & Dalrymple, R.A. -- Water Wave Mechanics for Engineers and Scientists
'''

from __future__ import annotations

import logging
import math
from typing import Sequence

import numpy as np

from computationalHydro.WaveForces import constants as c

logger = logging.getLogger(__name__)


def solveWaveNumber(
    omega: float,
    depth: float,
    g: float = c.gravity,
    tolerance: float = c.dispersionTolerance,
    maxIterations: int = c.dispersionMaxIterations,
) -> tuple[float, int]:
    '''
    Solve the dispersion relation for a single angular frequency.

    Parameters:
    -----------
    omega : float
        Angular frequency [rad/s]
    depth : float
        Water depth [m]
    g : float
        Gravitational acceleration [m/s^2]
    tolerance : float
        Stop once the Newton step |dk| is below this [rad/m]
    maxIterations : int
        Maximum number of Newton steps

    Returns:
    --------
    tuple[float, int] : (wavenumber k [rad/m], Newton steps taken)
    '''
    k = omega * omega / g

    iterations = 0
    error = math.inf
    while error > tolerance and iterations < maxIterations:
        tanhKh = math.tanh(k * depth)
        f = omega * omega - g * k * tanhKh
        fPrime = -2.0 * g * tanhKh - g * k * depth * (1.0 - tanhKh * tanhKh)

        # omega = 0 leaves k = 0 where the slope vanishes
        if abs(fPrime) < 1e-30:
            break

        dk = f / fPrime
        k -= dk
        error = abs(dk)
        iterations += 1

    if error > tolerance and iterations >= maxIterations:
        logger.debug(
            'Dispersion relation not converged for omega=%g, depth=%g '
            '(last |dk|=%.3e after %d iterations)',
            omega, depth, error, iterations,
        )

    return k, iterations


def computeWaveNumbers(
    omegas: Sequence[float] | np.ndarray,
    depth: float,
    g: float = c.gravity,
    tolerance: float = c.dispersionTolerance,
    maxIterations: int = c.dispersionMaxIterations,
) -> np.ndarray:
    '''
    Wavenumbers for a sequence of angular frequencies.

    Each frequency is solved independently; see solveWaveNumber().

    Parameters:
    -----------
    omegas : Sequence[float] | np.ndarray
        Angular frequencies [rad/s]
    depth : float
        Water depth [m]

    Returns:
    --------
    np.ndarray : Wavenumbers k [rad/m], same length as omegas
    '''
    omegaArray = np.asarray(omegas, dtype=float)
    waveNumbers = np.empty_like(omegaArray)

    for i, omega in enumerate(omegaArray):
        waveNumbers[i], _ = solveWaveNumber(float(omega), depth, g, tolerance, maxIterations)

    return waveNumbers


def dispersionResidual(
    waveNumbers: np.ndarray | float,
    omegas: np.ndarray | float,
    depth: float,
    g: float = c.gravity,
) -> np.ndarray:
    '''Residual omega^2 - g*k*tanh(k*d) of the dispersion relation.'''
    k = np.asarray(waveNumbers, dtype=float)
    omega = np.asarray(omegas, dtype=float)
    return omega * omega - g * k * np.tanh(k * depth)

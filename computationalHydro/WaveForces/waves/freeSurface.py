# -- Random-Phase Free Surface Synthesis -- #

'''
Free surface elevation time series from a wave spectrum.

Random-phase superposition of linear wave components:

    eta(t) = sum_i sqrt(A_i) * cos(omega_i * t + phi_i)
    A_i    = 2 * S(f_i) * df,   df = f_last / N
    phi_i  ~ U[0, 2*pi) from a generator seeded by the caller

For a fixed spectrum, time grid and seed the series is bit-for-bit
reproducible. The elevation history is then frozen into a
FreeSurfaceHistory that the excitation convolution reads.

Also builds the point/triangle strip used to visualize the history as a
surface mesh (x = -t, y = +/-meshHalfWidth, z = eta).
'''

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

import numpy as np

from computationalHydro.WaveForces import constants as c
from computationalHydro.WaveForces.errors import ConfigurationError
from computationalHydro.WaveForces.waves.dispersion import computeWaveNumbers
from computationalHydro.WaveForces.waves.spectrum import WaveSpectrum

logger = logging.getLogger(__name__)


######################################################################
# -- Data Types -- #
######################################################################

@dataclass(frozen=True)
class FreeSurfaceHistory:
    '''
    Precomputed free surface elevation samples.

    Read-only once built. The window must reach at least as far into the
    past as the longest impulse response support so that every
    convolution query lands inside it.

    Parameters:
    -----------
    time : np.ndarray
        Sample times [s], strictly ascending
    elevation : np.ndarray
        Elevation at each sample time [m]
    '''

    time: np.ndarray
    elevation: np.ndarray

    def __post_init__(self) -> None:
        time = np.array(self.time, dtype=float)
        elevation = np.array(self.elevation, dtype=float)

        if time.ndim != 1 or time.size < 2:
            raise ValueError('Free surface history needs at least two samples')
        if time.shape != elevation.shape:
            raise ValueError(
                f'Free surface history has {time.size} times but {elevation.size} elevations'
            )
        if not (np.all(np.isfinite(time)) and np.all(np.isfinite(elevation))):
            raise ValueError('Free surface history holds non-finite values')
        if np.any(np.diff(time) <= 0.0):
            raise ValueError('Free surface history times must be strictly ascending')

        time.setflags(write=False)
        elevation.setflags(write=False)
        object.__setattr__(self, 'time', time)
        object.__setattr__(self, 'elevation', elevation)

    def __len__(self) -> int:
        return self.time.size

    @property
    def startTime(self) -> float:
        '''Earliest sample time [s].'''
        return float(self.time[0])

    @property
    def endTime(self) -> float:
        '''Latest sample time [s].'''
        return float(self.time[-1])

    def contains(self, t: float | np.ndarray) -> bool:
        '''Whether every given time lies inside [startTime, endTime].'''
        t = np.asarray(t, dtype=float)
        return bool(np.all((t >= self.time[0]) & (t <= self.time[-1])))


@dataclass
class WaveComponents:
    '''
    Discrete linear wave components of a random-phase sea.

    Parameters:
    -----------
    omegas : np.ndarray
        Angular frequencies [rad/s]
    waveNumbers : np.ndarray
        Wavenumbers from the finite-depth dispersion relation [rad/m]
    amplitudes : np.ndarray
        Component weights sqrt(2 * S * df) [m]
    phases : np.ndarray
        Random phases in [0, 2*pi) [rad]
    '''

    omegas: np.ndarray
    waveNumbers: np.ndarray
    amplitudes: np.ndarray
    phases: np.ndarray

    def elevation(self, timeGrid: np.ndarray) -> np.ndarray:
        '''Superpose all components at the given times [m].'''
        t = np.asarray(timeGrid, dtype=float)
        eta = np.zeros_like(t)

        # One component at a time keeps memory at O(nTimes)
        for amplitude, omega, phase in zip(self.amplitudes, self.omegas, self.phases):
            eta += amplitude * np.cos(omega * t + phase)

        return eta


######################################################################
# -- Synthesis -- #
######################################################################

def randomPhaseComponents(
    freqsHz: np.ndarray,
    densities: np.ndarray,
    waterDepth: float,
    seed: int,
) -> WaveComponents:
    '''
    Discretize a spectrum into linear wave components with random phases.

    Parameters:
    -----------
    freqsHz : np.ndarray
        Frequency grid [Hz]
    densities : np.ndarray
        Spectral densities [m^2/Hz]
    waterDepth : float
        Water depth for the dispersion relation [m]
    seed : int
        Seed for the phase generator

    Returns:
    --------
    WaveComponents : Components with amplitudes, wavenumbers and phases
    '''
    freqs = np.asarray(freqsHz, dtype=float)
    spectralDensities = np.asarray(densities, dtype=float)

    deltaF = freqs[-1] / freqs.size
    omegas = 2.0 * np.pi * freqs
    waveNumbers = computeWaveNumbers(omegas, waterDepth)

    amplitudes = np.sqrt(2.0 * spectralDensities * deltaF)

    rng = np.random.default_rng(seed)
    phases = rng.uniform(0.0, 2.0 * np.pi, size=freqs.size)

    return WaveComponents(
        omegas=omegas,
        waveNumbers=waveNumbers,
        amplitudes=amplitudes,
        phases=phases,
    )


def synthesizeFreeSurfaceElevation(
    freqsHz: np.ndarray,
    densities: np.ndarray,
    timeGrid: np.ndarray,
    waterDepth: float,
    seed: int,
) -> np.ndarray:
    '''
    Random-phase free surface elevation at each time of the grid.

    Parameters:
    -----------
    freqsHz : np.ndarray
        Frequency grid [Hz]
    densities : np.ndarray
        Spectral densities [m^2/Hz]
    timeGrid : np.ndarray
        Output times [s]
    waterDepth : float
        Water depth [m]
    seed : int
        Seed for the phase generator

    Returns:
    --------
    np.ndarray : Elevation eta(t_j) [m]
    '''
    components = randomPhaseComponents(freqsHz, densities, waterDepth, seed)
    return components.elevation(timeGrid)


def applyRamp(elevation: np.ndarray, timeGrid: np.ndarray, rampDuration: float) -> np.ndarray:
    '''
    Linear 0 -> 1 ramp over the first rampDuration seconds of the series.

    Parameters:
    -----------
    elevation : np.ndarray
        Elevation series [m]
    timeGrid : np.ndarray
        Sample times [s]
    rampDuration : float
        Ramp length [s]; non-positive leaves the series unchanged

    Returns:
    --------
    np.ndarray : Ramped copy of the elevation
    '''
    eta = np.array(elevation, dtype=float)
    if rampDuration <= 0.0:
        return eta

    t = np.asarray(timeGrid, dtype=float)
    ramp = np.clip((t - t[0]) / rampDuration, 0.0, 1.0)
    return eta * ramp


def freeSurfaceTimeWindow(
    simulationDuration: float,
    simulationDt: float,
    irfTimeMin: float = 0.0,
    irfTimeMax: float = 0.0,
) -> np.ndarray:
    '''
    Time grid covering every convolution query of a run.

    A force at time t in [0, duration] needs eta(t - tau) for tau in
    [irfTimeMin, irfTimeMax]. The window starts at -irfTimeMax and is
    extended by twice the IRF support past the simulation end.

    Parameters:
    -----------
    simulationDuration : float
        Length of the simulated run [s]
    simulationDt : float
        Sample spacing [s]
    irfTimeMin : float
        Earliest IRF lag over all bodies, capped at 0 [s]
    irfTimeMax : float
        Latest IRF lag over all bodies, floored at 0 [s]

    Returns:
    --------
    np.ndarray : Ascending sample times [s]

    Raises:
    -------
    ValueError : If simulationDt is not positive
    ConfigurationError : If the window has zero or negative length
    '''
    if simulationDt <= 0.0:
        raise ValueError(f'simulationDt must be positive, got {simulationDt}')

    tMin = min(0.0, irfTimeMin)
    tMax = max(0.0, irfTimeMax)
    span = simulationDuration + 2.0 * (tMax - tMin)
    if span <= 0.0:
        raise ConfigurationError(
            'Free surface window has no length; set a positive simulationDuration '
            f'(duration={simulationDuration}, irf=[{tMin}, {tMax}])'
        )

    numSamples = max(2, int(math.ceil(span / simulationDt - 1e-9)) + 1)
    return np.linspace(0.0, span, numSamples) - tMax


def buildFreeSurfaceHistory(
    spectrum: WaveSpectrum,
    timeGrid: np.ndarray,
    waterDepth: float,
    seed: int,
    rampDuration: float = 0.0,
) -> FreeSurfaceHistory:
    '''
    Synthesize, ramp and freeze a free surface elevation history.

    Parameters:
    -----------
    spectrum : WaveSpectrum
        Sea state spectrum
    timeGrid : np.ndarray
        Sample times [s]
    waterDepth : float
        Water depth [m]
    seed : int
        Seed for the phase generator
    rampDuration : float
        Length of the start-up ramp [s]

    Returns:
    --------
    FreeSurfaceHistory : Frozen elevation history
    '''
    logger.info(
        'Precalculating free surface elevation from %.6f to %.6f (%d samples)',
        timeGrid[0], timeGrid[-1], len(timeGrid),
    )

    elevation = synthesizeFreeSurfaceElevation(
        spectrum.frequencies, spectrum.densities, timeGrid, waterDepth, seed,
    )
    elevation = applyRamp(elevation, timeGrid, rampDuration)

    logger.info('Finished precalculating free surface elevation')
    return FreeSurfaceHistory(time=timeGrid, elevation=elevation)


######################################################################
# -- Visualization Mesh -- #
######################################################################

def createFreeSurface3DPoints(elevation: np.ndarray, timeGrid: np.ndarray) -> np.ndarray:
    '''
    Two points per time sample: (-t, -w, eta) and (-t, +w, eta).

    Returns:
    --------
    np.ndarray : Points, shape (2 * nTimes, 3)
    '''
    t = np.asarray(timeGrid, dtype=float)
    eta = np.asarray(elevation, dtype=float)
    if t.shape != eta.shape:
        raise ValueError(f'{t.size} times but {eta.size} elevations')

    points = np.empty((2 * t.size, 3))
    points[0::2] = np.column_stack([-t, np.full_like(t, -c.meshHalfWidth), eta])
    points[1::2] = np.column_stack([-t, np.full_like(t, c.meshHalfWidth), eta])
    return points


def createFreeSurfaceTriangles(numTimes: int) -> np.ndarray:
    '''
    Zero-based ladder triangles between consecutive time columns.

    Column i owns points 2i and 2i+1; each gap yields the triangles
    (2i, 2i+1, 2i+3) and (2i, 2i+3, 2i+2).

    Returns:
    --------
    np.ndarray : Triangle indices, shape (2 * (numTimes - 1), 3)
    '''
    triangles = []
    for i in range(max(0, numTimes - 1)):
        triangles.append((2 * i, 2 * i + 1, 2 * i + 3))
        triangles.append((2 * i, 2 * i + 3, 2 * i + 2))

    return np.array(triangles, dtype=np.uint64).reshape(-1, 3)


def freeSurfaceMesh(elevation: np.ndarray, timeGrid: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    '''Point and triangle lists of the free surface strip.'''
    points = createFreeSurface3DPoints(elevation, timeGrid)
    triangles = createFreeSurfaceTriangles(len(timeGrid))
    return points, triangles

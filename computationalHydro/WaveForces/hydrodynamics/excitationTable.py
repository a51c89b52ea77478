# -- Excitation Tables -- #

'''
Per-body wave excitation coefficients.

Two representations of the same physics are held here:

1. Frequency domain (regular waves): excitation magnitude and phase
   indexed [dof, direction, frequency bin] over an angular frequency list.
2. Time domain (irregular waves): excitation impulse response function
   (IRF) indexed [dof, time sample] over an ascending lag grid, with the
   trapezoidal integration width of every sample:

       w_j = 0.5*(tau_{j+1} - tau_j) + 0.5*(tau_j - tau_{j-1})

   where the missing neighbour term is dropped at either end.

The hydrodynamic input structures (RegularWaveInfo, IrregularWaveInfo,
SimulationParameters) arrive already parsed from the coefficient files;
this module only validates and holds them.
'''

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from computationalHydro.WaveForces import constants as c
from computationalHydro.WaveForces.errors import ConfigurationError


#--------------------------------------------------------------------#
# -- Hydrodynamic Input Data -- #
#--------------------------------------------------------------------#

@dataclass
class SimulationParameters:
    '''
    Global parameters stored alongside the hydrodynamic coefficients.

    Parameters:
    -----------
    waterDepth : float
        Still water depth [m]
    gravity : float
        Gravitational acceleration [m/s^2]
    rho : float
        Water density [kg/m^3]
    '''
    waterDepth: float
    gravity: float = c.gravity
    rho: float = 1025.0


@dataclass
class RegularWaveInfo:
    '''
    Frequency-domain excitation of one body.

    Parameters:
    -----------
    freqList : np.ndarray
        Angular frequencies [rad/s], ascending
    excitationMagMatrix : np.ndarray
        Excitation magnitude per unit amplitude, shape (6, nDirections, nFreq)
    excitationPhaseMatrix : np.ndarray
        Excitation phase [rad], same shape as the magnitude
    '''
    freqList: np.ndarray
    excitationMagMatrix: np.ndarray
    excitationPhaseMatrix: np.ndarray


@dataclass
class IrregularWaveInfo:
    '''
    Time-domain excitation impulse response of one body.

    Parameters:
    -----------
    excitationIrfMatrix : np.ndarray
        IRF values, shape (6, nTimes)
    excitationIrfTime : np.ndarray
        IRF lag times [s], ascending, shape (nTimes,)
    '''
    excitationIrfMatrix: np.ndarray
    excitationIrfTime: np.ndarray


#--------------------------------------------------------------------#
# -- Integration Widths -- #
#--------------------------------------------------------------------#

def computeIntegrationWidths(timeArray: np.ndarray) -> np.ndarray:
    '''
    Trapezoidal integration weight of each sample of a time grid.

    Parameters:
    -----------
    timeArray : np.ndarray
        Ascending sample times [s]

    Returns:
    --------
    np.ndarray : Half-sum of the neighbouring gaps, end gaps zero-padded
    '''
    t = np.asarray(timeArray, dtype=float)
    widths = np.zeros_like(t)
    if t.size < 2:
        return widths

    halfGaps = 0.5 * np.abs(np.diff(t))
    widths[:-1] += halfGaps
    widths[1:] += halfGaps
    return widths


#--------------------------------------------------------------------#
# -- Excitation Table -- #
#--------------------------------------------------------------------#

class ExcitationTable:
    '''
    Excitation coefficients of a single body.

    Built once from hydrodynamic input; the impulse response part is
    replaced as a whole (time grid, values and widths together) by
    replaceImpulseResponse() and is otherwise read-only.

    Use the fromRegularWaveInfo() / fromIrregularWaveInfo() constructors.
    '''

    def __init__(self) -> None:
        self._freqList: np.ndarray | None = None
        self._excitationMag: np.ndarray | None = None
        self._excitationPhase: np.ndarray | None = None

        self._irfTime: np.ndarray | None = None
        self._irfValues: np.ndarray | None = None
        self._irfWidths: np.ndarray | None = None

    @classmethod
    def fromRegularWaveInfo(cls, info: RegularWaveInfo) -> ExcitationTable:
        '''
        Table holding frequency-domain magnitude and phase curves.

        A (6, nFreq) magnitude/phase pair is accepted as a single direction.
        '''
        freqList = np.array(info.freqList, dtype=float)
        magnitude = np.array(info.excitationMagMatrix, dtype=float)
        phase = np.array(info.excitationPhaseMatrix, dtype=float)

        if magnitude.ndim == 2:
            magnitude = magnitude[:, np.newaxis, :]
        if phase.ndim == 2:
            phase = phase[:, np.newaxis, :]

        if freqList.ndim != 1 or freqList.size < 2:
            raise ValueError('Excitation frequency list needs at least two frequencies')
        if np.any(np.diff(freqList) <= 0.0):
            raise ValueError('Excitation frequency list must be strictly ascending')
        if magnitude.shape != phase.shape:
            raise ValueError(
                f'Excitation magnitude {magnitude.shape} and phase {phase.shape} shapes differ'
            )
        if magnitude.ndim != 3 or magnitude.shape[0] != c.dofsPerBody or magnitude.shape[2] != freqList.size:
            raise ValueError(
                f'Excitation magnitude must be ({c.dofsPerBody}, nDirections, {freqList.size}), '
                f'got {magnitude.shape}'
            )

        table = cls()
        table._freqList = freqList
        table._excitationMag = magnitude
        table._excitationPhase = phase
        return table

    @classmethod
    def fromIrregularWaveInfo(cls, info: IrregularWaveInfo) -> ExcitationTable:
        '''Table holding the excitation impulse response and its widths.'''
        table = cls()
        table.replaceImpulseResponse(info.excitationIrfTime, info.excitationIrfMatrix)
        return table

    ######################################################################
    # -- Frequency Domain -- #
    ######################################################################

    @property
    def hasFrequencyData(self) -> bool:
        return self._freqList is not None

    @property
    def freqList(self) -> np.ndarray:
        '''Angular frequency list [rad/s].'''
        self._requireFrequencyData()
        return self._freqList

    @property
    def numDirections(self) -> int:
        self._requireFrequencyData()
        return self._excitationMag.shape[1]

    def frequencyIndex(self, omega: float) -> float:
        '''
        Fractional bin index of an angular frequency.

        Interpolated over the actual frequency list, which on a uniform
        grid starting at d_omega equals omega / d_omega - 1.

        Raises:
        -------
        ConfigurationError : If omega lies outside the tabulated range
        '''
        freqs = self.freqList
        if not freqs[0] <= omega <= freqs[-1]:
            raise ConfigurationError(
                f'Regular wave frequency {omega} rad/s outside tabulated range '
                f'[{freqs[0]}, {freqs[-1]}]'
            )
        return float(np.interp(omega, freqs, np.arange(freqs.size)))

    def interpolateExcitation(self, dof: int, freqIndex: float, directionIndex: int = 0) -> tuple[float, float]:
        '''
        Magnitude and phase at a fractional frequency bin.

        Linear interpolation between the floor and ceil bins.

        Parameters:
        -----------
        dof : int
            Degree of freedom 0..5
        freqIndex : float
            Fractional frequency bin index
        directionIndex : int
            Wave direction column

        Returns:
        --------
        tuple[float, float] : (magnitude, phase [rad])
        '''
        self._requireFrequencyData()

        lower = int(np.floor(freqIndex))
        upper = min(lower + 1, self._freqList.size - 1)
        fraction = freqIndex - lower

        magRow = self._excitationMag[dof, directionIndex]
        phaseRow = self._excitationPhase[dof, directionIndex]

        magnitude = magRow[lower] + fraction * (magRow[upper] - magRow[lower])
        phase = phaseRow[lower] + fraction * (phaseRow[upper] - phaseRow[lower])
        return float(magnitude), float(phase)

    def _requireFrequencyData(self) -> None:
        if self._freqList is None:
            raise ConfigurationError('Excitation table holds no frequency-domain data')

    ######################################################################
    # -- Time Domain -- #
    ######################################################################

    @property
    def hasImpulseResponse(self) -> bool:
        return self._irfTime is not None

    @property
    def irfTime(self) -> np.ndarray:
        '''IRF lag times [s].'''
        self._requireImpulseResponse()
        return self._irfTime

    @property
    def irfValues(self) -> np.ndarray:
        '''IRF values, shape (6, nTimes).'''
        self._requireImpulseResponse()
        return self._irfValues

    @property
    def irfWidths(self) -> np.ndarray:
        '''Trapezoidal integration widths [s].'''
        self._requireImpulseResponse()
        return self._irfWidths

    @property
    def irfTimeSpan(self) -> tuple[float, float]:
        '''(first lag, last lag) [s].'''
        t = self.irfTime
        return float(t[0]), float(t[-1])

    def replaceImpulseResponse(self, irfTime: np.ndarray, irfValues: np.ndarray) -> None:
        '''
        Replace the IRF time grid and values and recompute the widths.

        Parameters:
        -----------
        irfTime : np.ndarray
            Ascending lag times [s], shape (nTimes,)
        irfValues : np.ndarray
            IRF values, shape (6, nTimes)
        '''
        time = np.array(irfTime, dtype=float)
        values = np.array(irfValues, dtype=float)

        if time.ndim != 1 or time.size == 0:
            raise ValueError('IRF time grid must be a non-empty 1-D array')
        if np.any(np.diff(time) <= 0.0):
            raise ValueError('IRF time grid must be strictly ascending')
        if values.shape != (c.dofsPerBody, time.size):
            raise ValueError(
                f'IRF matrix must be ({c.dofsPerBody}, {time.size}), got {values.shape}'
            )

        widths = computeIntegrationWidths(time)
        for array in (time, values, widths):
            array.setflags(write=False)

        self._irfTime = time
        self._irfValues = values
        self._irfWidths = widths

    def _requireImpulseResponse(self) -> None:
        if self._irfTime is None:
            raise ConfigurationError('Excitation table holds no impulse response data')

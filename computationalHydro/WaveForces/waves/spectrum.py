# -- Wave Spectra -- #

'''
Parametric wave spectral-density models in cyclic frequency (Hz).

Pierson-Moskowitz (fully developed sea), written in terms of significant
wave height Hs and peak period Tp:

    S(f) = 1.25 * Tp^-4 * (Hs/2)^2 * f^-5 * exp(-1.25 * Tp^-4 * f^-4)

JONSWAP (fetch-limited sea) scales Pierson-Moskowitz by the peak
enhancement factor gamma:

    S_J(f) = S_PM(f) * gamma^exp(-(f*Tp - 1)^2 / (2*sigma^2))
    sigma  = 0.07 for f <= 1/Tp, 0.09 otherwise

With gamma = 1 JONSWAP reduces exactly to Pierson-Moskowitz.

References:
-----------
Pierson & Moskowitz (1964) -- A proposed spectral form for fully developed wind seas
Hasselmann et al. (1973) -- Measurements of wind-wave growth (JONSWAP)
'''

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from computationalHydro.WaveForces import constants as c


#--------------------------------------------------------------------#
# -- Spectrum Data -- #
#--------------------------------------------------------------------#

@dataclass(frozen=True)
class WaveSpectrum:
    '''
    Spectral density curve over an ascending frequency grid.

    Parameters:
    -----------
    frequencies : np.ndarray
        Frequencies [Hz], strictly ascending
    densities : np.ndarray
        Spectral densities [m^2/Hz], non-negative
    '''

    frequencies: np.ndarray
    densities: np.ndarray

    def __post_init__(self) -> None:
        frequencies = np.array(self.frequencies, dtype=float)
        densities = np.array(self.densities, dtype=float)

        if frequencies.size == 0:
            raise ValueError('Spectrum frequency list is empty')
        if frequencies.shape != densities.shape:
            raise ValueError(
                f'Spectrum has {frequencies.size} frequencies but {densities.size} densities'
            )
        if np.any(np.diff(frequencies) <= 0.0):
            raise ValueError('Spectrum frequencies must be strictly ascending')
        if frequencies[0] <= 0.0:
            raise ValueError(f'Spectrum frequencies must be positive, got {frequencies[0]}')
        if not np.all(np.isfinite(densities)):
            raise ValueError('Spectrum densities must be finite')
        if np.any(densities < 0.0):
            raise ValueError('Spectrum densities must be non-negative')

        frequencies.setflags(write=False)
        densities.setflags(write=False)
        object.__setattr__(self, 'frequencies', frequencies)
        object.__setattr__(self, 'densities', densities)

    def __len__(self) -> int:
        return self.frequencies.size

    @property
    def m0(self) -> float:
        '''Zeroth spectral moment (variance of elevation) [m^2].'''
        return float(np.trapezoid(self.densities, self.frequencies))

    @property
    def significantWaveHeight(self) -> float:
        '''Spectral significant wave height Hm0 = 4*sqrt(m0) [m].'''
        return 4.0 * np.sqrt(self.m0)


#--------------------------------------------------------------------#
# -- Frequency Grids -- #
#--------------------------------------------------------------------#

def spectrumFrequencies(
    start: float = c.defaultSpectrumStartHz,
    end: float = c.defaultSpectrumEndHz,
    numPoints: int = c.defaultSpectrumPoints,
) -> np.ndarray:
    '''Evenly spaced frequency grid from start to end inclusive [Hz].'''
    if numPoints < 1:
        raise ValueError(f'numPoints must be positive, got {numPoints}')
    if start <= 0.0:
        raise ValueError(f'Spectrum start frequency must be positive, got {start}')
    return np.linspace(start, end, numPoints)


#--------------------------------------------------------------------#
# -- Spectral Models -- #
#--------------------------------------------------------------------#

def piersonMoskowitzSpectrumHz(frequencies: np.ndarray | list[float], Hs: float, Tp: float) -> np.ndarray:
    '''
    Pierson-Moskowitz spectral densities.

    The frequency array is sorted ascending in place before evaluation,
    so the returned densities line up with the (now sorted) input.

    Parameters:
    -----------
    frequencies : np.ndarray | list[float]
        Frequencies [Hz], all positive; sorted in place
    Hs : float
        Significant wave height [m]
    Tp : float
        Peak period [s]

    Returns:
    --------
    np.ndarray : Spectral densities [m^2/Hz]
    '''
    frequencies.sort()
    freqs = np.asarray(frequencies, dtype=float)

    invTp4 = (1.0 / Tp) ** 4
    return 1.25 * invTp4 * (Hs / 2.0) ** 2 * freqs ** -5 * np.exp(-1.25 * invTp4 * freqs ** -4)


def jonswapSpectrumHz(
    frequencies: np.ndarray | list[float],
    Hs: float,
    Tp: float,
    gamma: float = c.defaultPeakEnhancementFactor,
) -> np.ndarray:
    '''
    JONSWAP spectral densities.

    Parameters:
    -----------
    frequencies : np.ndarray | list[float]
        Frequencies [Hz], all positive; sorted in place
    Hs : float
        Significant wave height [m]
    Tp : float
        Peak period [s]
    gamma : float
        Peak enhancement factor (1 gives Pierson-Moskowitz)

    Returns:
    --------
    np.ndarray : Spectral densities [m^2/Hz]
    '''
    densities = piersonMoskowitzSpectrumHz(frequencies, Hs, Tp)
    frequencies = np.asarray(frequencies, dtype=float)

    sigma = np.where(frequencies <= 1.0 / Tp, c.jonswapSigmaLow, c.jonswapSigmaHigh)
    peakShape = np.exp(-(1.0 / (2.0 * sigma ** 2)) * (frequencies * Tp - 1.0) ** 2)

    return densities * gamma ** peakShape


def createSpectrum(
    Hs: float,
    Tp: float,
    gamma: float = c.defaultPeakEnhancementFactor,
    frequencies: np.ndarray | None = None,
) -> WaveSpectrum:
    '''
    Build a JONSWAP WaveSpectrum on the given (or default) frequency grid.

    Parameters:
    -----------
    Hs : float
        Significant wave height [m]
    Tp : float
        Peak period [s]
    gamma : float
        Peak enhancement factor
    frequencies : np.ndarray | None
        Frequency grid [Hz]; default 1000 points from 0.001 to 1.0 Hz

    Returns:
    --------
    WaveSpectrum : Spectrum on the sorted grid
    '''
    if frequencies is None:
        frequencies = spectrumFrequencies()
    grid = np.array(frequencies, dtype=float)

    densities = jonswapSpectrumHz(grid, Hs, Tp, gamma)
    return WaveSpectrum(frequencies=grid, densities=densities)

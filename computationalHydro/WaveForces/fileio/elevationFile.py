# -- Elevation and Spectrum Text Files -- #

'''
Plain-text series files in `<x> : <y>` form, one sample per line.

Used for:
    - Free surface elevation files (read as an alternative elevation
      source, written as a debug dump): `<time> : <elevation>`
    - Spectrum debug dumps: `<frequency> : <spectral density>`

Values are written with Python's shortest round-trip float repr, so a
written series reads back to the identical pairs. Whitespace around
either field is ignored on read; blank lines are skipped.

File access goes through a TextFilePort so callers (and tests) can swap
the local filesystem for another store.
'''

from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Protocol

import numpy as np

from computationalHydro.WaveForces.errors import DataFormatError
from computationalHydro.WaveForces.waves.freeSurface import FreeSurfaceHistory
from computationalHydro.WaveForces.waves.spectrum import WaveSpectrum

logger = logging.getLogger(__name__)


#--------------------------------------------------------------------#
# -- File Ports -- #
#--------------------------------------------------------------------#

class TextFilePort(Protocol):
    '''Protocol for reading and writing whole text files.'''

    def readText(self, path: str) -> str:
        '''Return the file contents; raise OSError if unavailable.'''
        ...

    def writeText(self, path: str, text: str) -> None:
        '''Create or overwrite the file with text.'''
        ...


class LocalTextFilePort:
    '''TextFilePort backed by the local filesystem.'''

    def readText(self, path: str) -> str:
        return Path(path).read_text(encoding='utf-8')

    def writeText(self, path: str, text: str) -> None:
        outPath = Path(path)
        outPath.parent.mkdir(parents=True, exist_ok=True)
        outPath.write_text(text, encoding='utf-8')


#--------------------------------------------------------------------#
# -- Line Format -- #
#--------------------------------------------------------------------#

def formatSeriesLines(xValues: np.ndarray, yValues: np.ndarray) -> str:
    '''Join paired values as `<x> : <y>` lines.'''
    xs = np.asarray(xValues, dtype=float)
    ys = np.asarray(yValues, dtype=float)
    if xs.shape != ys.shape:
        raise ValueError(f'{xs.size} x values but {ys.size} y values')

    return ''.join(f'{float(x)!r} : {float(y)!r}\n' for x, y in zip(xs, ys))


def parseSeriesLines(text: str, source: str = '<string>') -> tuple[np.ndarray, np.ndarray]:
    '''
    Parse `<x> : <y>` lines into two arrays.

    Parameters:
    -----------
    text : str
        File contents
    source : str
        Name used in error messages

    Returns:
    --------
    tuple[np.ndarray, np.ndarray] : (x values, y values)

    Raises:
    -------
    DataFormatError : If a non-blank line is not two colon-separated finite numbers
    '''
    xValues: list[float] = []
    yValues: list[float] = []

    for lineNumber, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue

        fields = line.split(':')
        if len(fields) != 2:
            raise DataFormatError(f'{source}:{lineNumber}: could not parse line: {line!r}')

        try:
            x = float(fields[0])
            y = float(fields[1])
        except ValueError as e:
            raise DataFormatError(f'{source}:{lineNumber}: could not parse line: {line!r}') from e

        if not (math.isfinite(x) and math.isfinite(y)):
            raise DataFormatError(f'{source}:{lineNumber}: non-finite value in line: {line!r}')

        xValues.append(x)
        yValues.append(y)

    return np.array(xValues), np.array(yValues)


#--------------------------------------------------------------------#
# -- Elevation Files -- #
#--------------------------------------------------------------------#

def readElevationFile(path: str, port: TextFilePort | None = None) -> FreeSurfaceHistory:
    '''
    Read a free surface elevation history from a `<time> : <eta>` file.

    Parameters:
    -----------
    path : str
        File to read
    port : TextFilePort | None
        File access (default: local filesystem)

    Returns:
    --------
    FreeSurfaceHistory : History with the file's times and elevations

    Raises:
    -------
    DataFormatError : If the file is missing, unreadable or malformed
    '''
    port = port or LocalTextFilePort()

    logger.info('Reading eta file %s', path)
    try:
        text = port.readText(path)
    except (OSError, UnicodeDecodeError) as e:
        raise DataFormatError(f'Unable to open file at: {path}') from e

    times, elevations = parseSeriesLines(text, source=str(path))

    try:
        history = FreeSurfaceHistory(time=times, elevation=elevations)
    except ValueError as e:
        raise DataFormatError(f'{path}: {e}') from e

    logger.info('Finished reading eta file (%d samples)', len(history))
    return history


def writeElevationFile(path: str, history: FreeSurfaceHistory, port: TextFilePort | None = None) -> None:
    '''Write a free surface elevation history as `<time> : <eta>` lines.'''
    port = port or LocalTextFilePort()
    port.writeText(path, formatSeriesLines(history.time, history.elevation))
    logger.debug('Wrote %d elevation samples to %s', len(history), path)


def writeSpectrumFile(path: str, spectrum: WaveSpectrum, port: TextFilePort | None = None) -> None:
    '''Write a spectrum as `<frequency> : <spectral density>` lines.'''
    port = port or LocalTextFilePort()
    port.writeText(path, formatSeriesLines(spectrum.frequencies, spectrum.densities))
    logger.debug('Wrote %d spectrum bins to %s', len(spectrum), path)

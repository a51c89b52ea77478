# -- Elevation File Tests -- #

'''
Reading and writing `<time> : <eta>` series files.
'''

import numpy as np
import pytest

from computationalHydro.WaveForces.errors import DataFormatError
from computationalHydro.WaveForces.fileio.elevationFile import (
    LocalTextFilePort,
    formatSeriesLines,
    parseSeriesLines,
    readElevationFile,
    writeElevationFile,
    writeSpectrumFile,
)
from computationalHydro.WaveForces.waves.freeSurface import FreeSurfaceHistory
from computationalHydro.WaveForces.waves.spectrum import createSpectrum


def testWriteThenReadOnDisk(tmp_path):
    rng = np.random.default_rng(0)
    history = FreeSurfaceHistory(
        time=np.linspace(-3.0, 7.0, 51),
        elevation=rng.normal(scale=0.8, size=51),
    )
    path = tmp_path / 'nested' / 'eta.txt'

    writeElevationFile(str(path), history)
    loaded = readElevationFile(str(path))

    assert np.array_equal(loaded.time, history.time)
    assert np.array_equal(loaded.elevation, history.elevation)


def testReadPopulatesTimeAndElevation(memoryPort):
    memoryPort.files['eta.txt'] = '0.0 : 0.5\n0.5 : -0.25\n1.0 : 0.125\n'
    history = readElevationFile('eta.txt', memoryPort)

    assert history.time.tolist() == [0.0, 0.5, 1.0]
    assert history.elevation.tolist() == [0.5, -0.25, 0.125]


def testWhitespaceAndBlankLinesTolerated():
    times, values = parseSeriesLines('  1.5 :   -0.25  \n\n2.5:1e-3\n   \n')
    assert times.tolist() == [1.5, 2.5]
    assert values.tolist() == [-0.25, 1e-3]


@pytest.mark.parametrize('text', [
    '0.0 : 1.0\n1.0 2.0\n',
    '0.0 : 1.0\na : b\n',
    '0.0 : 1.0 : 2.0\n',
    '0.0 :\n',
])
def testMalformedLineRaises(text):
    with pytest.raises(DataFormatError):
        parseSeriesLines(text, source='eta.txt')


@pytest.mark.parametrize('text', [
    '0.0 : 1.0\nnan : 2.0\n2.0 : 3.0\n',
    '0.0 : 1.0\n1.0 : inf\n2.0 : 3.0\n',
    '0.0 : -inf\n1.0 : 0.0\n',
])
def testNonFiniteValuesRejected(memoryPort, text):
    memoryPort.files['eta.txt'] = text
    with pytest.raises(DataFormatError, match='non-finite'):
        readElevationFile('eta.txt', memoryPort)


def testUndecodableFileRaises(tmp_path):
    path = tmp_path / 'eta.txt'
    path.write_bytes(b'\xff\xfe : 2.0\n')
    with pytest.raises(DataFormatError, match='Unable to open file'):
        readElevationFile(str(path))


def testMalformedLineReportsLineNumber():
    with pytest.raises(DataFormatError, match=r'eta\.txt:2'):
        parseSeriesLines('0.0 : 1.0\nnot a line\n', source='eta.txt')


def testMissingFileRaises(tmp_path):
    with pytest.raises(DataFormatError, match='Unable to open file'):
        readElevationFile(str(tmp_path / 'missing.txt'))


def testNonAscendingTimesRaise(memoryPort):
    memoryPort.files['eta.txt'] = '1.0 : 0.0\n0.5 : 0.0\n'
    with pytest.raises(DataFormatError):
        readElevationFile('eta.txt', memoryPort)


def testSingleSampleFileRaises(memoryPort):
    memoryPort.files['eta.txt'] = '1.0 : 0.0\n'
    with pytest.raises(DataFormatError):
        readElevationFile('eta.txt', memoryPort)


def testSpectrumDumpLines(memoryPort):
    spectrum = createSpectrum(1.0, 5.0, frequencies=np.array([0.1, 0.2, 0.3]))
    writeSpectrumFile('spectral_densities.txt', spectrum, memoryPort)

    lines = memoryPort.files['spectral_densities.txt'].splitlines()
    assert len(lines) == 3
    assert lines[0].startswith('0.1 : ')
    freqs, densities = parseSeriesLines(memoryPort.files['spectral_densities.txt'])
    assert np.array_equal(densities, spectrum.densities)


def testFormatRejectsMismatchedLengths():
    with pytest.raises(ValueError):
        formatSeriesLines(np.zeros(2), np.zeros(3))


def testLocalPortCreatesParentDirectories(tmp_path):
    path = tmp_path / 'a' / 'b' / 'c.txt'
    port = LocalTextFilePort()
    port.writeText(str(path), 'hello\n')
    assert port.readText(str(path)) == 'hello\n'

# -- Visualization Tests -- #

'''
Plotly figures build with the expected traces.
'''

import numpy as np

from computationalHydro.WaveForces.visualization.wavePlots import (
    plotForceHistory,
    plotFreeSurfaceElevation,
    plotSpectrum,
)
from computationalHydro.WaveForces.waves.freeSurface import FreeSurfaceHistory
from computationalHydro.WaveForces.waves.spectrum import createSpectrum


def testSpectrumFigure():
    fig = plotSpectrum(createSpectrum(2.0, 8.0))
    assert len(fig.data) == 1
    assert 'Hm0' in fig.layout.title.text


def testElevationFigureRespectsTimeRange():
    history = FreeSurfaceHistory(time=np.linspace(-5.0, 5.0, 101), elevation=np.zeros(101))
    fig = plotFreeSurfaceElevation(history, timeRange=(-0.01, 5.01))
    assert len(fig.data[0].x) == 51


def testForceHistoryHasOneTracePerDof():
    times = np.linspace(0.0, 1.0, 11)
    forces = np.random.default_rng(0).normal(size=(11, 12))
    fig = plotForceHistory(times, forces, body=1)

    assert len(fig.data) == 6
    assert np.allclose(fig.data[2].y, forces[:, 8])

# -- Visualization Subpackage -- #

'''
Plotly-based interactive plots of spectra, free surface histories and
excitation force histories.
'''

from computationalHydro.WaveForces.visualization.wavePlots import (
    plotFreeSurfaceElevation,
    plotForceHistory,
    plotSpectrum,
)

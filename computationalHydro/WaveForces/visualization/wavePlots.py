# -- Wave Force Visualizations -- #

'''
Plotly-based interactive plots for sea states and excitation forces.
'''

from __future__ import annotations

import numpy as np
import plotly.graph_objects as go
from plotly.subplots import make_subplots

from computationalHydro.WaveForces import constants as c
from computationalHydro.WaveForces.visualization import theme
from computationalHydro.WaveForces.waves.freeSurface import FreeSurfaceHistory
from computationalHydro.WaveForces.waves.spectrum import WaveSpectrum


def plotSpectrum(spectrum: WaveSpectrum, title: str = 'Wave Spectrum') -> go.Figure:
    '''
    Spectral density vs frequency, with the peak marked.

    Parameters:
    -----------
    spectrum : WaveSpectrum
        Spectrum to plot
    title : str
        Figure title

    Returns:
    --------
    go.Figure : Plotly figure
    '''
    peakIndex = int(np.argmax(spectrum.densities))
    peakFreq = spectrum.frequencies[peakIndex]

    fig = go.Figure()

    fig.add_trace(go.Scatter(
        x=spectrum.frequencies, y=spectrum.densities,
        mode='lines', name='S(f)',
        fill='tozeroy', line=dict(color=theme.BLUE, width=2),
    ))

    fig.add_vline(
        x=peakFreq,
        line=dict(color=theme.REFERENCE_LINE, dash='dash', width=1),
        annotation_text=f'fp = {peakFreq:.3f} Hz',
    )

    fig.update_layout(
        title=f'{title} (Hm0={spectrum.significantWaveHeight:.2f} m)',
        xaxis_title='Frequency (Hz)',
        yaxis_title='Spectral density (m²/Hz)',
        template=theme.TEMPLATE,
        height=400,
    )

    return fig


def plotFreeSurfaceElevation(
    history: FreeSurfaceHistory,
    timeRange: tuple[float, float] | None = None,
) -> go.Figure:
    '''
    Free surface elevation history.

    Parameters:
    -----------
    history : FreeSurfaceHistory
        Precomputed elevation samples
    timeRange : tuple[float, float] | None
        Restrict the plot to [start, end] seconds

    Returns:
    --------
    go.Figure : Plotly figure
    '''
    t = history.time
    eta = history.elevation
    if timeRange is not None:
        mask = (t >= timeRange[0]) & (t <= timeRange[1])
        t, eta = t[mask], eta[mask]

    fig = go.Figure()

    fig.add_trace(go.Scatter(
        x=t, y=eta, mode='lines', name='η(t)',
        line=dict(color=theme.CYAN, width=1),
    ))

    # Still water level
    fig.add_hline(y=0, line=dict(color=theme.REFERENCE_LINE, dash='dash', width=1))

    fig.update_layout(
        title='Free Surface Elevation',
        xaxis_title='Time (s)',
        yaxis_title='Elevation (m)',
        template=theme.TEMPLATE,
        height=400,
    )

    return fig


def plotForceHistory(times: np.ndarray, forces: np.ndarray, body: int = 0) -> go.Figure:
    '''
    Excitation force history of one body, one subplot per DOF.

    Parameters:
    -----------
    times : np.ndarray
        Simulation times [s], shape (nSteps,)
    forces : np.ndarray
        Force vectors from getForceAtTime, shape (nSteps, 6 * numBodies)
    body : int
        Body to plot

    Returns:
    --------
    go.Figure : Plotly figure with 6 stacked subplots
    '''
    forces = np.atleast_2d(forces)
    offset = c.dofsPerBody * body

    fig = make_subplots(
        rows=c.dofsPerBody, cols=1, shared_xaxes=True,
        subplot_titles=theme.DOF_NAMES,
    )

    for dof in range(c.dofsPerBody):
        fig.add_trace(
            go.Scatter(x=times, y=forces[:, offset + dof], mode='lines',
                       name=theme.DOF_NAMES[dof],
                       line=dict(color=theme.DOF_COLORS[dof], width=1)),
            row=dof + 1, col=1,
        )

    fig.update_xaxes(title_text='Time (s)', row=c.dofsPerBody, col=1)

    fig.update_layout(
        title=f'Excitation Force History (body {body})',
        template=theme.TEMPLATE,
        height=200 * c.dofsPerBody,
        showlegend=False,
    )

    return fig

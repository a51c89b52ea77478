# -- Wave Force Variants -- #

'''
Still-water, regular and irregular wave excitation force providers.

NoWave
    Always returns zeros.

RegularWave
    Closed-form monochromatic forcing. initialize() interpolates each
    body's excitation magnitude |X| and phase theta at the wave frequency;
    afterwards

        F_dof(t) = |X_dof| * A * cos(omega * t + theta_dof)

IrregularWaves
    Convolution of each body's excitation impulse response with a
    precomputed free surface elevation history. addHydroData() builds the
    excitation tables, resamples the IRFs onto the simulation step, and
    either reads the elevation from a file or synthesizes it from a
    JONSWAP spectrum. The provider is then ready and read-only.
'''

from __future__ import annotations

import logging
import os
from dataclasses import replace
from typing import Sequence

import numpy as np

from computationalHydro.WaveForces import constants as c
from computationalHydro.WaveForces.config import (
    IrregularWaveParams,
    RegularWaveParams,
    WaveForceConfig,
    WaveMode,
)
from computationalHydro.WaveForces.errors import ConfigurationError
from computationalHydro.WaveForces.export.meshExporter import writeFreeSurfaceMeshObj
from computationalHydro.WaveForces.fileio.elevationFile import (
    LocalTextFilePort,
    TextFilePort,
    readElevationFile,
    writeElevationFile,
    writeSpectrumFile,
)
from computationalHydro.WaveForces.forces.protocols import WaveForceProvider
from computationalHydro.WaveForces.hydrodynamics.convolution import ConvolutionEngine
from computationalHydro.WaveForces.hydrodynamics.excitationTable import (
    ExcitationTable,
    IrregularWaveInfo,
    RegularWaveInfo,
    SimulationParameters,
)
from computationalHydro.WaveForces.hydrodynamics.irfResampler import resampleExcitationTables
from computationalHydro.WaveForces.waves.freeSurface import (
    FreeSurfaceHistory,
    buildFreeSurfaceHistory,
    freeSurfaceMesh,
    freeSurfaceTimeWindow,
)
from computationalHydro.WaveForces.waves.spectrum import WaveSpectrum, createSpectrum, spectrumFrequencies

logger = logging.getLogger(__name__)


######################################################################
# -- Still Water -- #
######################################################################

class NoWave:
    '''
    Still water: no excitation on any body.

    Parameters:
    -----------
    numBodies : int
        Number of floating bodies
    '''

    def __init__(self, numBodies: int = 1) -> None:
        self._numBodies = numBodies

    @property
    def mode(self) -> WaveMode:
        return WaveMode.NO_WAVE

    @property
    def numBodies(self) -> int:
        return self._numBodies

    def getForceAtTime(self, t: float) -> np.ndarray:
        return np.zeros(c.dofsPerBody * self._numBodies)


######################################################################
# -- Regular Waves -- #
######################################################################

class RegularWave:
    '''
    Monochromatic wave excitation from frequency-domain coefficients.

    Parameters:
    -----------
    params : RegularWaveParams
        Amplitude, angular frequency and body count
    '''

    def __init__(self, params: RegularWaveParams) -> None:
        self._params = params
        self._tables: list[ExcitationTable] = []

        self._magnitudes: np.ndarray | None = None
        self._phases: np.ndarray | None = None

    @property
    def mode(self) -> WaveMode:
        return WaveMode.REGULAR

    @property
    def numBodies(self) -> int:
        return self._params.numBodies

    @property
    def excitationMagnitudes(self) -> np.ndarray:
        '''Interpolated |X| per body and DOF, length 6 * numBodies.'''
        self._requireInitialized()
        return self._magnitudes.copy()

    @property
    def excitationPhases(self) -> np.ndarray:
        '''Interpolated phase per body and DOF [rad], length 6 * numBodies.'''
        self._requireInitialized()
        return self._phases.copy()

    def addHydroData(self, regularWaveInfo: Sequence[RegularWaveInfo]) -> None:
        '''Attach one frequency-domain excitation record per body.'''
        if len(regularWaveInfo) != self.numBodies:
            raise ValueError(
                f'Expected excitation data for {self.numBodies} bodies, got {len(regularWaveInfo)}'
            )
        self._tables = [ExcitationTable.fromRegularWaveInfo(info) for info in regularWaveInfo]

    def initialize(self) -> None:
        '''
        Interpolate excitation magnitude and phase at the wave frequency.

        Raises:
        -------
        ConfigurationError : If no hydro data is attached or the wave
            frequency lies outside a body's frequency table
        '''
        if not self._tables:
            raise ConfigurationError('Regular wave has no excitation data; call addHydroData first')

        totalDofs = c.dofsPerBody * self.numBodies
        magnitudes = np.zeros(totalDofs)
        phases = np.zeros(totalDofs)

        for body, table in enumerate(self._tables):
            freqIndex = table.frequencyIndex(self._params.omega)
            offset = c.dofsPerBody * body
            for dof in range(c.dofsPerBody):
                magnitudes[offset + dof], phases[offset + dof] = table.interpolateExcitation(
                    dof, freqIndex, self._params.directionIndex,
                )

        self._magnitudes = magnitudes
        self._phases = phases

    def getForceAtTime(self, t: float) -> np.ndarray:
        self._requireInitialized()
        amplitude = self._params.amplitude
        omega = self._params.omega
        return self._magnitudes * amplitude * np.cos(omega * t + self._phases)

    def _requireInitialized(self) -> None:
        if self._magnitudes is None:
            raise ConfigurationError('Regular wave not initialized; call initialize first')


######################################################################
# -- Irregular Waves -- #
######################################################################

class IrregularWaves:
    '''
    Spectral sea excitation via impulse response convolution.

    Starts uninitialized; addHydroData() moves it to ready, after which
    the excitation tables and the free surface history are frozen.

    Parameters:
    -----------
    params : IrregularWaveParams
        Sea state, time stepping, ramp, seed and optional elevation file
    filePort : TextFilePort | None
        File access for the elevation file, debug dumps and mesh export
    '''

    def __init__(self, params: IrregularWaveParams, filePort: TextFilePort | None = None) -> None:
        self._params = params
        self._filePort = filePort or LocalTextFilePort()

        self._spectrumFrequencies: np.ndarray = spectrumFrequencies()
        self._spectrum: WaveSpectrum | None = None
        self._simParams: SimulationParameters | None = None
        self._tables: list[ExcitationTable] = []
        self._history: FreeSurfaceHistory | None = None
        self._engine: ConvolutionEngine | None = None
        self._meshFileName: str | None = None

    @property
    def mode(self) -> WaveMode:
        return WaveMode.IRREGULAR

    @property
    def numBodies(self) -> int:
        return self._params.numBodies

    @property
    def isReady(self) -> bool:
        '''Whether a free surface history exists and forces can be served.'''
        return self._engine is not None

    @property
    def excitationTables(self) -> list[ExcitationTable]:
        return list(self._tables)

    ######################################################################
    # -- Setup -- #
    ######################################################################

    def setSpectrumFrequencies(self, start: float, end: float, numPoints: int) -> np.ndarray:
        '''
        Replace the spectrum frequency grid used by the next synthesis.

        Must be called before addHydroData() to take effect.

        Returns:
        --------
        np.ndarray : The new grid [Hz]
        '''
        self._spectrumFrequencies = spectrumFrequencies(start, end, numPoints)
        return self._spectrumFrequencies.copy()

    def addHydroData(
        self,
        irregularWaveInfo: Sequence[IrregularWaveInfo],
        simParams: SimulationParameters,
    ) -> None:
        '''
        Attach impulse responses and build the free surface history.

        Parameters:
        -----------
        irregularWaveInfo : Sequence[IrregularWaveInfo]
            One excitation IRF record per body
        simParams : SimulationParameters
            Global hydrodynamic parameters (water depth)

        Raises:
        -------
        DataFormatError : If the configured elevation file cannot be read
        ConfigurationError : If synthesis is requested without a positive
            simulation time step
        '''
        if len(irregularWaveInfo) != self.numBodies:
            raise ValueError(
                f'Expected excitation data for {self.numBodies} bodies, got {len(irregularWaveInfo)}'
            )

        self._simParams = simParams
        self._tables = [ExcitationTable.fromIrregularWaveInfo(info) for info in irregularWaveInfo]

        resampleExcitationTables(self._tables, self._params.simulationDt)

        if self._params.etaFilePath:
            self._history = readElevationFile(self._params.etaFilePath, self._filePort)
            self._spectrum = None
        elif self._params.waveHeight != 0.0 and self._params.wavePeriod != 0.0:
            self._createSpectrum()
            self._createFreeSurfaceElevation()
        else:
            logger.warning(
                'Irregular waves have neither an eta file nor wave height/period; '
                'no free surface elevation was created'
            )
            return

        self._engine = ConvolutionEngine(self._tables, self._history)

    def _irfTimeBounds(self) -> tuple[float, float]:
        '''Earliest and latest IRF lag over all bodies, bracketing zero.'''
        tMin, tMax = 0.0, 0.0
        for table in self._tables:
            first, last = table.irfTimeSpan
            tMin = min(tMin, first, last)
            tMax = max(tMax, first, last)
        return tMin, tMax

    def _createSpectrum(self) -> None:
        params = self._params
        self._spectrum = createSpectrum(
            params.waveHeight,
            params.wavePeriod,
            params.peakEnhancementFactor,
            frequencies=self._spectrumFrequencies,
        )

        if params.debugOutputDir:
            path = os.path.join(params.debugOutputDir, c.spectrumDumpName)
            writeSpectrumFile(path, self._spectrum, self._filePort)

    def _createFreeSurfaceElevation(self) -> None:
        params = self._params
        if params.simulationDt <= 0.0:
            raise ConfigurationError(
                'Free surface synthesis needs a positive simulationDt '
                f'(got {params.simulationDt})'
            )

        tMin, tMax = self._irfTimeBounds()
        timeGrid = freeSurfaceTimeWindow(params.simulationDuration, params.simulationDt, tMin, tMax)

        self._history = buildFreeSurfaceHistory(
            self._spectrum,
            timeGrid,
            self._simParams.waterDepth,
            params.seed,
            params.rampDuration,
        )

        if params.debugOutputDir:
            path = os.path.join(params.debugOutputDir, c.elevationDumpName)
            writeElevationFile(path, self._history, self._filePort)

    ######################################################################
    # -- Queries -- #
    ######################################################################

    def getForceAtTime(self, t: float) -> np.ndarray:
        '''
        Excitation forces of all bodies at time t.

        Raises:
        -------
        ConfigurationError : If no free surface elevation exists
        DomainError : If t - tau leaves the precomputed window for any lag
        '''
        engine = self._requireReady()

        forces = np.zeros(c.dofsPerBody * self.numBodies)
        for body in range(self.numBodies):
            offset = c.dofsPerBody * body
            forces[offset:offset + c.dofsPerBody] = engine.bodyForceAt(body, t)

        return forces

    def getSpectrum(self) -> WaveSpectrum:
        '''
        Spectrum used for synthesis.

        Raises:
        -------
        ConfigurationError : If no spectrum was created (no wave height and
            period, or the elevation came from a file)
        '''
        if self._spectrum is None:
            raise ConfigurationError(
                'Spectrum has not been created. Initialize with wave height and period to create spectrum.'
            )
        return self._spectrum

    def getSpectrumFrequencies(self) -> np.ndarray:
        '''Spectrum frequency grid [Hz].'''
        return self._spectrumFrequencies.copy()

    def getFreeSurfaceHistory(self) -> FreeSurfaceHistory:
        if self._history is None:
            raise ConfigurationError('Free surface elevation has not been created')
        return self._history

    def getFreeSurfaceElevation(self) -> np.ndarray:
        '''Precomputed elevation samples [m].'''
        return self.getFreeSurfaceHistory().elevation.copy()

    def getEtaTimeData(self) -> np.ndarray:
        '''Times of the precomputed elevation samples [s].'''
        return self.getFreeSurfaceHistory().time.copy()

    def _requireReady(self) -> ConvolutionEngine:
        if self._engine is None:
            raise ConfigurationError(
                'Irregular waves are not initialized; no free surface elevation is available'
            )
        return self._engine

    ######################################################################
    # -- Visualization Mesh -- #
    ######################################################################

    def setUpWaveMesh(self, fileName: str = 'fse_mesh.obj') -> str:
        '''
        Export the free surface over the simulated run as an OBJ strip.

        Uses the history samples inside [0, simulationDuration] (the whole
        history when no duration is configured).

        Returns:
        --------
        str : Path of the written mesh file
        '''
        history = self.getFreeSurfaceHistory()

        duration = self._params.simulationDuration
        if duration > 0.0:
            mask = (history.time >= 0.0) & (history.time <= duration)
        else:
            mask = np.ones(len(history), dtype=bool)

        points, triangles = freeSurfaceMesh(history.elevation[mask], history.time[mask])
        self._meshFileName = writeFreeSurfaceMeshObj(points, triangles, fileName, self._filePort)
        logger.info('Wrote free surface mesh with %d vertices to %s', len(points), fileName)
        return self._meshFileName

    def getMeshFile(self) -> str | None:
        return self._meshFileName

    def getWaveMeshVelocity(self) -> np.ndarray:
        '''Velocity of the mesh frame; the strip is laid out with x = -t.'''
        return np.array(c.waveMeshVelocity)


######################################################################
# -- Factory -- #
######################################################################

def createWaveForceProvider(
    config: WaveForceConfig,
    filePort: TextFilePort | None = None,
) -> WaveForceProvider:
    '''
    Create the wave force variant selected by the configuration.

    Regular and irregular providers still need their hydro data attached
    (and initialize() for regular waves) before serving forces.

    Parameters:
    -----------
    config : WaveForceConfig
        Wave mode and per-variant parameters
    filePort : TextFilePort | None
        File access for the irregular variant

    Returns:
    --------
    WaveForceProvider : Provider instance

    Raises:
    -------
    ValueError : If the wave mode is unknown
    '''
    if config.waveMode == WaveMode.NO_WAVE:
        return NoWave(config.numBodies)
    elif config.waveMode == WaveMode.REGULAR:
        return RegularWave(replace(config.regular, numBodies=config.numBodies))
    elif config.waveMode == WaveMode.IRREGULAR:
        return IrregularWaves(replace(config.irregular, numBodies=config.numBodies), filePort)
    else:
        raise ValueError(f'Unknown wave mode: {config.waveMode}')

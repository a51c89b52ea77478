# -- Wave Force Configuration -- #

'''
Configuration surface of the wave excitation force core.

The host supplies these values; nothing here resolves paths from the
environment. A JSON file with optional sections may be used:

{
    "simulation": {"numBodies": 2, "dt": 0.01, "duration": 300.0},
    "wave": {"mode": "irregular", "rampDuration": 10.0, "etaFilePath": null,
             "debugOutputDir": null},
    "regular": {"amplitude": 0.5, "omega": 1.0},
    "irregular": {"waveHeight": 2.0, "wavePeriod": 8.0,
                  "peakEnhancementFactor": 3.3, "seed": 1}
}
'''

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum

from computationalHydro.WaveForces import constants as c


class WaveMode(str, Enum):
    '''Selects the active wave force variant.'''

    NO_WAVE = 'noWave'
    REGULAR = 'regular'
    IRREGULAR = 'irregular'


@dataclass
class RegularWaveParams:
    '''
    Regular (monochromatic) wave parameters.

    Parameters:
    -----------
    numBodies : int
        Number of floating bodies
    amplitude : float
        Wave amplitude [m]
    omega : float
        Wave angular frequency [rad/s]
    directionIndex : int
        Wave direction column of the excitation tables
    '''
    numBodies: int = 1
    amplitude: float = 0.0
    omega: float = 0.0
    directionIndex: int = 0


@dataclass
class IrregularWaveParams:
    '''
    Irregular (spectral) wave parameters.

    Parameters:
    -----------
    numBodies : int
        Number of floating bodies
    waveHeight : float
        Significant wave height Hs [m]; 0 disables spectrum synthesis
    wavePeriod : float
        Peak period Tp [s]; 0 disables spectrum synthesis
    peakEnhancementFactor : float
        JONSWAP gamma (1 gives Pierson-Moskowitz)
    seed : int
        Seed for the random phases
    simulationDt : float
        Simulation time step [s]; non-positive keeps the native IRF sampling
    simulationDuration : float
        Simulated run length [s]
    rampDuration : float
        Length of the elevation start-up ramp [s]
    etaFilePath : str | None
        Elevation file to read instead of synthesizing
    debugOutputDir : str | None
        Directory for spectrum/eta debug dumps; None disables them
    '''
    numBodies: int = 1
    waveHeight: float = 0.0
    wavePeriod: float = 0.0
    peakEnhancementFactor: float = c.defaultPeakEnhancementFactor
    seed: int = 1
    simulationDt: float = 0.0
    simulationDuration: float = 0.0
    rampDuration: float = 0.0
    etaFilePath: str | None = None
    debugOutputDir: str | None = None


@dataclass
class WaveForceConfig:
    '''
    Complete wave force configuration.

    Parameters:
    -----------
    waveMode : WaveMode
        Active variant
    numBodies : int
        Number of floating bodies
    regular : RegularWaveParams
        Used when waveMode is REGULAR
    irregular : IrregularWaveParams
        Used when waveMode is IRREGULAR
    '''
    waveMode: WaveMode = WaveMode.NO_WAVE
    numBodies: int = 1
    regular: RegularWaveParams = field(default_factory=RegularWaveParams)
    irregular: IrregularWaveParams = field(default_factory=IrregularWaveParams)

    @classmethod
    def fromDict(cls, data: dict) -> WaveForceConfig:
        '''
        Build a configuration from parsed JSON sections.

        Parameters:
        -----------
        data : dict
            Mapping with optional 'simulation', 'wave', 'regular' and
            'irregular' sections

        Returns:
        --------
        WaveForceConfig : Configuration with defaults for missing keys
        '''
        simSection = data.get('simulation', {})
        waveSection = data.get('wave', {})
        regularSection = data.get('regular', {})
        irregularSection = data.get('irregular', {})

        numBodies = int(simSection.get('numBodies', 1))
        waveMode = WaveMode(waveSection.get('mode', WaveMode.NO_WAVE.value))

        regular = RegularWaveParams(
            numBodies=numBodies,
            amplitude=regularSection.get('amplitude', 0.0),
            omega=regularSection.get('omega', 0.0),
            directionIndex=regularSection.get('directionIndex', 0),
        )
        irregular = IrregularWaveParams(
            numBodies=numBodies,
            waveHeight=irregularSection.get('waveHeight', 0.0),
            wavePeriod=irregularSection.get('wavePeriod', 0.0),
            peakEnhancementFactor=irregularSection.get(
                'peakEnhancementFactor', c.defaultPeakEnhancementFactor
            ),
            seed=irregularSection.get('seed', 1),
            simulationDt=simSection.get('dt', 0.0),
            simulationDuration=simSection.get('duration', 0.0),
            rampDuration=waveSection.get('rampDuration', 0.0),
            etaFilePath=waveSection.get('etaFilePath'),
            debugOutputDir=waveSection.get('debugOutputDir'),
        )

        return cls(waveMode=waveMode, numBodies=numBodies, regular=regular, irregular=irregular)

    @classmethod
    def fromJson(cls, configPath: str) -> WaveForceConfig:
        '''Load a configuration from a JSON file.'''
        with open(configPath, 'r') as f:
            data = json.load(f)

        return cls.fromDict(data)

# -- Wave Forces Runner -- #

'''
Command-line entry point for generating irregular sea states.

Builds the JONSWAP spectrum and the random-phase free surface history
that an irregular-wave run would use, writes the spectrum/eta text dumps
and the free surface OBJ mesh, and optionally an interactive Plotly
report.

Usage:
    python -m computationalHydro.WaveForces                          # Default sea state
    python -m computationalHydro.WaveForces --hs 3.0 --tp 10 --seed 7
    python -m computationalHydro.WaveForces --config configs/irregular.json --plot
'''

from __future__ import annotations

import argparse
import logging
import os
import time as timeModule

from computationalHydro.WaveForces import constants as const
from computationalHydro.WaveForces.config import IrregularWaveParams, WaveForceConfig
from computationalHydro.WaveForces.export.meshExporter import writeFreeSurfaceMeshObj
from computationalHydro.WaveForces.fileio.elevationFile import (
    readElevationFile,
    writeElevationFile,
    writeSpectrumFile,
)
from computationalHydro.WaveForces.waves.freeSurface import (
    buildFreeSurfaceHistory,
    freeSurfaceMesh,
    freeSurfaceTimeWindow,
)
from computationalHydro.WaveForces.waves.spectrum import createSpectrum


#--------------------------------------------------------------------#
# -- CLI Argument Parser -- #
#--------------------------------------------------------------------#

def buildParser() -> argparse.ArgumentParser:
    '''Build the CLI argument parser.'''
    parser = argparse.ArgumentParser(
        description='WaveForces -- irregular sea state generation',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        '--config', type=str, default=None,
        help='Path to JSON configuration file',
    )
    parser.add_argument('--hs', type=float, default=2.0, help='Significant wave height [m] (default: 2.0)')
    parser.add_argument('--tp', type=float, default=8.0, help='Peak period [s] (default: 8.0)')
    parser.add_argument(
        '--gamma', type=float, default=const.defaultPeakEnhancementFactor,
        help='JONSWAP peak enhancement factor (default: 3.3)',
    )
    parser.add_argument('--seed', type=int, default=1, help='Random phase seed (default: 1)')
    parser.add_argument('--dt', type=float, default=0.05, help='Sample spacing [s] (default: 0.05)')
    parser.add_argument('--duration', type=float, default=300.0, help='Duration [s] (default: 300)')
    parser.add_argument('--ramp', type=float, default=0.0, help='Ramp duration [s] (default: 0)')
    parser.add_argument('--depth', type=float, default=50.0, help='Water depth [m] (default: 50)')
    parser.add_argument(
        '--output-dir', type=str, default='computationalHydro/WaveForces/output',
        help='Output directory for dumps, mesh and plots',
    )
    parser.add_argument('--plot', action='store_true', help='Write an HTML Plotly report')
    parser.add_argument('--verbose', action='store_true', help='Enable debug logging')

    return parser


#--------------------------------------------------------------------#
# -- Runner Class -- #
#--------------------------------------------------------------------#

class WaveForcesRunner:
    '''
    Generates a sea state and writes its artifacts.

    Handles the full pipeline: spectrum, free surface history (synthesized
    or read from an eta file), debug dumps, mesh export and plots.
    '''

    def runSeaState(
        self,
        params: IrregularWaveParams,
        waterDepth: float,
        outputDir: str = 'computationalHydro/WaveForces/output',
        doPlot: bool = False,
    ) -> dict:
        '''
        Generate and export one sea state.

        Parameters:
        -----------
        params : IrregularWaveParams
            Sea state and time grid parameters
        waterDepth : float
            Water depth [m]
        outputDir : str
            Output directory
        doPlot : bool
            Whether to write the Plotly HTML report

        Returns:
        --------
        dict : Summary with output paths and sea state statistics
        '''
        print()
        print('=' * 62)
        print('  WAVEFORCES -- IRREGULAR SEA STATE')
        print('=' * 62)
        print()

        os.makedirs(outputDir, exist_ok=True)
        startWall = timeModule.perf_counter()

        spectrum = None
        if params.etaFilePath:
            history = readElevationFile(params.etaFilePath)
        else:
            spectrum = createSpectrum(params.waveHeight, params.wavePeriod, params.peakEnhancementFactor)
            timeGrid = freeSurfaceTimeWindow(params.simulationDuration, params.simulationDt)
            history = buildFreeSurfaceHistory(
                spectrum, timeGrid, waterDepth, params.seed, params.rampDuration,
            )

        elapsed = timeModule.perf_counter() - startWall

        #--------------------------------------------------------------------#
        # Exports
        #--------------------------------------------------------------------#
        outputs: dict[str, str] = {}

        if spectrum is not None:
            outputs['spectrum'] = os.path.join(outputDir, const.spectrumDumpName)
            writeSpectrumFile(outputs['spectrum'], spectrum)

        outputs['eta'] = os.path.join(outputDir, const.elevationDumpName)
        writeElevationFile(outputs['eta'], history)

        points, triangles = freeSurfaceMesh(history.elevation, history.time)
        outputs['mesh'] = writeFreeSurfaceMeshObj(
            points, triangles, os.path.join(outputDir, 'fse_mesh.obj'),
        )

        if doPlot:
            from computationalHydro.WaveForces.visualization.wavePlots import (
                plotFreeSurfaceElevation,
                plotSpectrum,
            )

            outputs['elevationPlot'] = os.path.join(outputDir, 'elevation.html')
            plotFreeSurfaceElevation(history).write_html(outputs['elevationPlot'])
            if spectrum is not None:
                outputs['spectrumPlot'] = os.path.join(outputDir, 'spectrum.html')
                plotSpectrum(spectrum).write_html(outputs['spectrumPlot'])

        #--------------------------------------------------------------------#
        # Summary
        #--------------------------------------------------------------------#
        print('-' * 62)
        print('  SEA STATE')
        print('-' * 62)
        if spectrum is not None:
            print(f'  Hs (input):        {params.waveHeight:8.3f} m')
            print(f'  Hm0 (spectral):    {spectrum.significantWaveHeight:8.3f} m')
            print(f'  Tp:                {params.wavePeriod:8.3f} s')
            print(f'  Gamma:             {params.peakEnhancementFactor:8.3f}')
            print(f'  Seed:              {params.seed:8d}')
        else:
            print(f'  Eta file:          {params.etaFilePath}')
        print(f'  Window:            [{history.startTime:.2f}, {history.endTime:.2f}] s')
        print(f'  Samples:           {len(history):8d}')
        print(f'  Std(eta):          {history.elevation.std():8.4f} m')
        print(f'  Wall time:         {elapsed:8.3f} s')
        print()
        for name, path in outputs.items():
            print(f'  {name:<18} {path}')
        print()

        return {
            'samples': len(history),
            'startTime': history.startTime,
            'endTime': history.endTime,
            'etaStd': float(history.elevation.std()),
            'outputs': outputs,
        }


#--------------------------------------------------------------------#
# -- Entry Point -- #
#--------------------------------------------------------------------#

def main(argv: list[str] | None = None) -> dict:
    '''Parse arguments and run.'''
    args = buildParser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(levelname)s %(name)s: %(message)s',
    )

    if args.config:
        params = WaveForceConfig.fromJson(args.config).irregular
    else:
        params = IrregularWaveParams(
            waveHeight=args.hs,
            wavePeriod=args.tp,
            peakEnhancementFactor=args.gamma,
            seed=args.seed,
            simulationDt=args.dt,
            simulationDuration=args.duration,
            rampDuration=args.ramp,
        )

    return WaveForcesRunner().runSeaState(
        params, waterDepth=args.depth, outputDir=args.output_dir, doPlot=args.plot,
    )


if __name__ == '__main__':
    main()

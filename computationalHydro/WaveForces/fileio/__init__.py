# -- File I/O Subpackage -- #

'''
Colon-delimited series files (elevation input, debug dumps) and the
injectable text file port.
'''

from computationalHydro.WaveForces.fileio.elevationFile import (
    LocalTextFilePort,
    TextFilePort,
    readElevationFile,
    writeElevationFile,
    writeSpectrumFile,
)

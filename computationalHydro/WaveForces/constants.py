# -- Physical Constants for Wave Excitation Forces -- #

'''
Physical and numerical constants for wave excitation force computation.
All values in SI units unless otherwise noted.

References:
-----------
Newman (1977) -- Marine Hydrodynamics
Hasselmann et al. (1973) -- JONSWAP spectrum
'''

#--------------------------------------------------------------------#
# -- Fluid Properties -- #
#--------------------------------------------------------------------#

# Gravitational acceleration [m/s^2]
gravity: float = 9.81

#--------------------------------------------------------------------#
# -- Rigid Body -- #
#--------------------------------------------------------------------#

# Degrees of freedom per body (surge, sway, heave, roll, pitch, yaw)
dofsPerBody: int = 6

#--------------------------------------------------------------------#
# -- Dispersion Relation Solver -- #
#--------------------------------------------------------------------#

# Newton iteration stops once |dk| falls below this [rad/m]
dispersionTolerance: float = 1e-6

# Hard cap on Newton iterations; the last iterate is returned regardless
dispersionMaxIterations: int = 100

#--------------------------------------------------------------------#
# -- Spectrum Defaults -- #
#--------------------------------------------------------------------#

# Default spectrum frequency grid [Hz]
defaultSpectrumStartHz: float = 0.001
defaultSpectrumEndHz: float = 1.0
defaultSpectrumPoints: int = 1000

# JONSWAP peak-width parameters (below / above the peak frequency)
jonswapSigmaLow: float = 0.07
jonswapSigmaHigh: float = 0.09

# Default JONSWAP peak-enhancement factor
defaultPeakEnhancementFactor: float = 3.3

#--------------------------------------------------------------------#
# -- Free Surface Mesh -- #
#--------------------------------------------------------------------#

# Transverse offsets of the free-surface strip [m]
meshHalfWidth: float = 10.0

# The strip is built with x = -t, so it advects at unit speed along +x
waveMeshVelocity: tuple[float, float, float] = (1.0, 0.0, 0.0)

#--------------------------------------------------------------------#
# -- Debug Dump File Names -- #
#--------------------------------------------------------------------#

spectrumDumpName: str = 'spectral_densities.txt'
elevationDumpName: str = 'eta.txt'

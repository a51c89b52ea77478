# -- WaveForces Module Entry -- #

'''Allows `python -m computationalHydro.WaveForces`.'''

from computationalHydro.WaveForces.runner import main

if __name__ == '__main__':
    main()

# -- Computational Hydrodynamics Package -- #

'''
Master package for the computational hydrodynamics toolkit.

Domain-specific sub-packages:
    - WaveForces: Time-domain wave excitation forces on floating bodies
'''

# -- Export Subpackage -- #

'''
Free surface mesh export (Wavefront OBJ).
'''

from computationalHydro.WaveForces.export.meshExporter import formatObjMesh, writeFreeSurfaceMeshObj

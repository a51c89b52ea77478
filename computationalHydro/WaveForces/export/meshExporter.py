# -- Free Surface Mesh Exporter -- #

'''
Writes the free surface point/triangle strip as a Wavefront OBJ file.

Layout:
    # header comment block (exporter name, creation time)
    # Vertices: N
    v  x y z        (fixed 6 decimals, width 14)
    # Faces: M
    f  i j k        (1-based indices, width 9)

Only a visualization artifact; the force computation never reads it.
'''

from __future__ import annotations

from datetime import datetime

import numpy as np

from computationalHydro.WaveForces.fileio.elevationFile import LocalTextFilePort, TextFilePort


def formatObjMesh(points: np.ndarray, triangles: np.ndarray, created: datetime | None = None) -> str:
    '''
    Render points and zero-based triangles as OBJ text.

    Parameters:
    -----------
    points : np.ndarray
        Vertex coordinates, shape (N, 3)
    triangles : np.ndarray
        Zero-based vertex indices, shape (M, 3)
    created : datetime | None
        Timestamp for the header (default: now)

    Returns:
    --------
    str : OBJ file contents
    '''
    points = np.asarray(points, dtype=float).reshape(-1, 3)
    triangles = np.asarray(triangles, dtype=np.int64).reshape(-1, 3)
    created = created or datetime.now()

    lines = [
        '# Wavefront OBJ file exported by computationalHydro WaveForces',
        f'# File Created: {created:%Y-%m-%d %H:%M:%S}',
        '',
        f'# Vertices: {len(points)}',
        '',
    ]
    lines.extend(f'v {x:14.6f} {y:14.6f} {z:14.6f}' for x, y, z in points)
    lines.append('')

    lines.append(f'# Faces: {len(triangles)}')
    lines.append('')
    lines.extend(f'f {i + 1:9d}{j + 1:9d}{k + 1:9d}' for i, j, k in triangles)

    return '\n'.join(lines) + '\n'


def writeFreeSurfaceMeshObj(
    points: np.ndarray,
    triangles: np.ndarray,
    fileName: str,
    port: TextFilePort | None = None,
) -> str:
    '''
    Write the free surface strip to an OBJ file.

    Parameters:
    -----------
    points : np.ndarray
        Vertex coordinates, shape (N, 3)
    triangles : np.ndarray
        Zero-based vertex indices, shape (M, 3)
    fileName : str
        Output path
    port : TextFilePort | None
        File access (default: local filesystem)

    Returns:
    --------
    str : Path of the written file
    '''
    port = port or LocalTextFilePort()
    port.writeText(fileName, formatObjMesh(points, triangles))
    return str(fileName)

# -- Visualization Theme -- #

'''
Centralized dark-mode theme for all WaveForces Plotly visualizations.

Change colors or template here to restyle every plot at once.
'''

# Plotly template
TEMPLATE = 'plotly_dark'

# Primary color palette (Material Design, visible on dark backgrounds)
BLUE = '#42A5F5'
RED = '#EF5350'
GREEN = '#66BB6A'
ORANGE = '#FFA726'
PURPLE = '#AB47BC'
CYAN = '#26C6DA'

# Neutrals
WHITE = '#E0E0E0'
REFERENCE_LINE = '#888888'

# One color per rigid-body DOF (surge, sway, heave, roll, pitch, yaw)
DOF_COLORS = [BLUE, RED, GREEN, ORANGE, PURPLE, CYAN]
DOF_NAMES = ['Surge', 'Sway', 'Heave', 'Roll', 'Pitch', 'Yaw']

"""
EXAMPLE 2
---------
The rows of example 1 are built from modules with cells of 15.6 cm that are
arranged in 2 strings across the width of a row. Compare the beam shading
fraction of the linear shading model with the fraction of the step-wise (cell
based) model, which accounts for the electrical loss of a string as soon as
it is partly shaded.
"""
import numpy as np
from pvshading import Quantity
from pvshading.near_shading import (
    MappingSettings,
    resolve_layout,
    beam_shading_fraction
)

Q_ = Quantity

settings = {
    'ArrayType': 'Unlimited Rows',
    'PlaneTilt': 30,
    'Azimuth': 0,
    'Pitch': 4.0,
    'CollBandWidth': 2.0,
    'ShadingLimit': 23.79,
    'RowsBlock': 10,
    'UseCellVal': False
}
linear = resolve_layout(MappingSettings(settings))

settings.update({'UseCellVal': True, 'CellSize': 15.6, 'StrInWid': 2})
stepwise = resolve_layout(MappingSettings(settings))

for theta_z in np.linspace(60.0, 88.0, 8):
    zenith = Q_(theta_z, 'deg').to('rad').m
    beam_lin, alpha_p = beam_shading_fraction(linear, zenith, 0.0)
    beam_cell, _ = beam_shading_fraction(stepwise, zenith, 0.0)
    print(
        f"profile angle {Q_(alpha_p, 'rad').to('deg'):~P.1f}: "
        f"linear {beam_lin:.3f} | cell based {beam_cell:.3f}"
    )

"""
EXAMPLE 1
---------
Rows of collectors with a slope of 30°, a bandwidth of 2 m and a pitch of
4 m face due south. The array consists of blocks of 10 rows. Calculate during
a sunny afternoon the profile angle of the sun, the beam shading fraction and
the plane-of-array irradiance that remains after inter-row shading.
"""
from pvshading import Quantity
from pvshading.logging import ModuleLogger
from pvshading.sun.shading import shading_limit_angle
from pvshading.near_shading import MappingSettings, resolve_layout, evaluate

Q_ = Quantity

# show the layout constants derived by the resolver
ModuleLogger.set_level('pvshading.near_shading.layout', ModuleLogger.DEBUG)

psi = shading_limit_angle(
    beta=Q_(30, 'deg').to('rad').m,
    bandwidth=2.0,
    pitch=4.0
)

layout = resolve_layout(MappingSettings({
    'ArrayType': 'Unlimited Rows',
    'PlaneTilt': 30,
    'Azimuth': 0,
    'Pitch': 4.0,
    'CollBandWidth': 2.0,
    'ShadingLimit': Q_(psi, 'rad').to('deg').m,
    'RowsBlock': 10,
    'UseCellVal': False
}))

print(
    f"shading limit angle: {Q_(layout.shading_limit_angle, 'rad').to('deg'):~P.2f}",
    f"diffuse shading fraction: {layout.diffuse_shading_fraction:.3f}",
    f"reflected shading fraction: {layout.reflected_shading_fraction:.3f}",
    sep='\n'
)

# (zenith angle, azimuth angle, beam, diffuse, ground-reflected)
sun_positions = [
    (Q_(45, 'deg'), Q_(20, 'deg'), 750.0, 110.0, 25.0),
    (Q_(60, 'deg'), Q_(45, 'deg'), 620.0, 100.0, 20.0),
    (Q_(72, 'deg'), Q_(60, 'deg'), 410.0, 85.0, 12.0),
    (Q_(82, 'deg'), Q_(75, 'deg'), 150.0, 50.0, 5.0),
]
for theta_z, gamma_s, I_dir, I_dif, I_ref in sun_positions:
    r = evaluate(
        layout,
        theta_z.to('rad').m,
        gamma_s.to('rad').m,
        I_dir, I_dif, I_ref
    )
    I_glo = Q_(r.shaded_global, 'W / m ** 2')
    print(
        f"zenith {theta_z:~P.0f}, azimuth {gamma_s:~P.0f}: "
        f"profile angle {Q_(r.profile_angle, 'rad').to('deg'):~P.1f}, "
        f"beam fraction {r.beam_fraction:.3f}, "
        f"shaded global irradiance {I_glo:~P.1f}"
    )

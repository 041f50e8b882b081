"""
Near shading of the plane-of-array irradiance.

`evaluate()` takes the layout of the array, the position of the sun and the
beam, diffuse and ground-reflected irradiance on the tilted collector plane,
and returns the irradiance components that remain after shading by the
neighboring rows. It is meant to be called once per timestep of an
energy-yield simulation: it has no state, does no I/O and does not raise on
numeric input.

References
----------
Duffie, J. A., Beckman, W. A., & Blair, N. (2020). SOLAR ENGINEERING OF
THERMAL PROCESSES, PHOTOVOLTAICS AND WIND. John Wiley & Sons. Example 1.9.3.
"""
from dataclasses import dataclass

from pvshading.sun.geometry import solar_altitude_angle, profile_angle, sun_in_front
from pvshading.sun.shading import shaded_length
from .layout import ArrayLayout, UnlimitedRowsLayout


@dataclass(frozen=True)
class ShadingResult:
    """Shading fractions and shaded irradiance at one sun position.

    Attributes
    ----------
    beam_fraction:
        Fraction of the beam irradiance that remains after shading.
    diffuse_fraction:
        Fraction of the diffuse irradiance that remains after shading.
    reflected_fraction:
        Fraction of the ground-reflected irradiance that remains after
        shading.
    profile_angle:
        Profile angle of the sun in radians (zero when the sun is below the
        horizon or behind the collectors, and always zero for fixed tilt
        arrays).
    shaded_direct, shaded_diffuse, shaded_reflected:
        Irradiance components on the collector plane after shading, W/m².
    shaded_global:
        Sum of the three shaded irradiance components, W/m².
    """
    beam_fraction: float
    diffuse_fraction: float
    reflected_fraction: float
    profile_angle: float
    shaded_direct: float
    shaded_diffuse: float
    shaded_reflected: float
    shaded_global: float


def shaded_fraction(
    layout: UnlimitedRowsLayout,
    sun_zenith: float,
    sun_azimuth: float
) -> tuple[float, float]:
    """Returns the fraction of a collector row that lies in the shadow of the
    row in front of it, together with the profile angle of the sun.

    Parameters
    ----------
    layout:
        Layout of the rows.
    sun_zenith: radians
        Zenith angle of the sun.
    sun_azimuth: radians
        Azimuth angle of the sun; east of south negative, west of south
        positive.

    Returns
    -------
    shaded fraction, profile angle in radians
    """
    if not sun_in_front(sun_zenith, sun_azimuth, layout.collector_azimuth):
        return 0.0, 0.0

    alpha_p = float(profile_angle(
        solar_altitude_angle(sun_zenith),
        sun_azimuth,
        layout.collector_azimuth
    ))
    if layout.shading_limit_angle <= alpha_p:
        # shadow of the front row ends before the foot of this row
        return 0.0, alpha_p

    AAp = shaded_length(
        layout.collector_tilt,
        layout.collector_bandwidth,
        layout.shading_limit_angle,
        alpha_p
    )
    if layout.cell_model is None:
        return AAp / layout.collector_bandwidth, alpha_p
    cells_shaded = AAp / layout.cell_model.cell_size
    return layout.cell_model.shaded_fraction(cells_shaded), alpha_p


def beam_shading_fraction(
    layout: ArrayLayout,
    sun_zenith: float,
    sun_azimuth: float
) -> tuple[float, float]:
    """Returns the fraction of the beam irradiance that remains after
    shading, together with the profile angle of the sun in radians.

    Rows are only shaded for the part `row_block_factor` of a block. Near
    shading of fixed tilt arrays is not modeled: their beam fraction is
    always 1.
    """
    if isinstance(layout, UnlimitedRowsLayout):
        f, alpha_p = shaded_fraction(layout, sun_zenith, sun_azimuth)
        return 1.0 - f * layout.row_block_factor, alpha_p
    return 1.0, 0.0


def evaluate(
    layout: ArrayLayout,
    sun_zenith: float,
    sun_azimuth: float,
    tilted_direct: float,
    tilted_diffuse: float,
    tilted_reflected: float
) -> ShadingResult:
    """Applies near shading to the irradiance on the tilted collector plane.

    Parameters
    ----------
    layout:
        Layout of the collector array, see `resolve_layout()`.
    sun_zenith: radians
        Zenith angle of the sun.
    sun_azimuth: radians
        Azimuth angle of the sun; east of south negative, west of south
        positive.
    tilted_direct: W/m²
        Beam irradiance on the collector plane.
    tilted_diffuse: W/m²
        Diffuse irradiance on the collector plane.
    tilted_reflected: W/m²
        Ground-reflected irradiance on the collector plane.
    """
    beam, alpha_p = beam_shading_fraction(layout, sun_zenith, sun_azimuth)
    diffuse = layout.diffuse_shading_fraction
    reflected = layout.reflected_shading_fraction

    shaded_direct = tilted_direct * beam
    shaded_diffuse = tilted_diffuse * diffuse
    shaded_reflected = tilted_reflected * reflected
    return ShadingResult(
        beam_fraction=beam,
        diffuse_fraction=diffuse,
        reflected_fraction=reflected,
        profile_angle=alpha_p,
        shaded_direct=shaded_direct,
        shaded_diffuse=shaded_diffuse,
        shaded_reflected=shaded_reflected,
        shaded_global=shaded_direct + shaded_diffuse + shaded_reflected
    )


if __name__ == '__main__':

    from pvshading import Quantity
    from .settings import MappingSettings
    from .layout import resolve_layout

    Q_ = Quantity

    layout = resolve_layout(MappingSettings({
        'ArrayType': 'Unlimited Rows',
        'PlaneTilt': '30',
        'Azimuth': '0',
        'Pitch': '4.0',
        'CollBandWidth': '2.0',
        'ShadingLimit': '23.8',
        'RowsBlock': '10'
    }))
    for zenith in (40.0, 60.0, 75.0, 85.0):
        result = evaluate(
            layout,
            sun_zenith=Q_(zenith, 'deg').to('rad').m,
            sun_azimuth=0.0,
            tilted_direct=600.0,
            tilted_diffuse=150.0,
            tilted_reflected=20.0
        )
        print(
            f"zenith = {zenith:.0f}°: "
            f"profile angle = {Q_(result.profile_angle, 'rad').to('deg'):~P.1f}, "
            f"beam fraction = {result.beam_fraction:.3f}, "
            f"shaded global irradiance = {Q_(result.shaded_global, 'W / m ** 2'):~P.1f}"
        )

import pint

UNITS = pint.UnitRegistry()
Quantity = UNITS.Quantity

# dimensionless shading fractions and plane-of-array irradiance
unit_definitions = [
    'fraction = [] = frac',
    'percent = 1e-2 frac = % = pct',
    'irradiance_unit = watt / meter ** 2 = W_m2'
]
for ud in unit_definitions:
    UNITS.define(ud)

pint.set_application_registry(UNITS)


def magnitude_in(value: float, from_unit: str, to_unit: str) -> float:
    """Converts the plain number `value`, expressed in `from_unit`, to
    `to_unit` and returns the magnitude as a float, e.g.
    `magnitude_in(30.0, 'deg', 'rad')` or `magnitude_in(15.6, 'cm', 'm')`.
    """
    return float(Quantity(value, from_unit).to(to_unit).magnitude)

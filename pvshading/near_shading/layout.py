"""
Static layout of the collector array and the shading constants that follow
from it.

Two array types are supported:

- `FixedTiltLayout`: a single tilted collector plane without rows in front of
  it. Near shading of the beam component is not modeled; the diffuse and
  ground-reflected components are reduced by the view factors of the tilted
  plane to the sky and the ground.
- `UnlimitedRowsLayout`: long parallel rows of collectors (sheds). The front
  row of each block of rows is unshaded; all other rows are shaded by the row
  ahead. Optionally, the beam shading is converted into an electrical loss
  with a step-wise cell model (`CellModel`).

The constant shading fractions of the diffuse and ground-reflected
components are derived when the layout object is created and never change
afterwards. `resolve_layout()` creates the layout from the simulation
settings.
"""
from __future__ import annotations

import bisect
from dataclasses import dataclass, field
from enum import Enum

import numpy as np

from pvshading.logging import ModuleLogger
from pvshading.sun.shading import shading_limit_angle
from .settings import SettingsSource, ErrLevel, ConfigurationError


logger = ModuleLogger.get_logger(__name__)

# deviation between the configured shading limit angle and the angle implied
# by tilt, bandwidth and pitch above which a warning is logged
SHADING_LIMIT_TOLERANCE = np.radians(0.5)


class ArrayType(Enum):
    FIXED_TILT = 'Fixed Tilted'
    UNLIMITED_ROWS = 'Unlimited Rows'

    @classmethod
    def parse(cls, text: str | None) -> ArrayType:
        """Returns the array type named by `text`. Any other text selects
        `FIXED_TILT`.
        """
        for member in cls:
            if member.value == text:
                return member
        logger.debug(f"array type '{text}' unknown; using 'Fixed Tilted'")
        return cls.FIXED_TILT


@dataclass(frozen=True)
class CellModel:
    """Step-wise (cell based) shading model.

    The shaded fraction of a row grows in steps: every string of modules
    across the width of the row (transverse direction) that is hit by the
    shadow is assumed to be lost electrically.

    Parameters
    ----------
    cell_size:
        Size of a cell in meters.
    transverse_string_count:
        Number of module strings across the width of a row.
    cell_boundaries:
        Number of cells from the foot of the row up to the upper edge of
        string 0, 1, ..., N (index 0 is the foot of the row).
    shading_steps:
        Shading fraction when string 0, 1, ..., N is completely shaded.
    """
    cell_size: float
    transverse_string_count: int
    cell_boundaries: tuple[float, ...]
    shading_steps: tuple[float, ...]

    @classmethod
    def build(
        cls,
        bandwidth: float,
        cell_size: float,
        transverse_string_count: int
    ) -> CellModel:
        if cell_size <= 0.0:
            raise ConfigurationError('cell size must be positive')
        if transverse_string_count < 1:
            raise ConfigurationError(
                'number of strings in the transverse direction must be at '
                'least 1'
            )
        n = transverse_string_count
        cells_across = bandwidth / cell_size
        return cls(
            cell_size=cell_size,
            transverse_string_count=n,
            cell_boundaries=tuple(i / n * cells_across for i in range(n + 1)),
            shading_steps=tuple(i / n for i in range(n + 1))
        )

    def shaded_fraction(self, cells_shaded: float) -> float:
        """Returns the shading fraction of a row of which `cells_shaded`
        cells, counted from the foot of the row, lie in the shadow.

        Inside the interval of string i the fraction grows from step i-1 and
        is capped at step i. At or below the foot of the row the fraction is
        the first step (zero); at or above the top of the row it is the last
        step (one). At a string boundary it is exactly the step of that
        boundary.
        """
        b = self.cell_boundaries
        s = self.shading_steps
        if cells_shaded <= b[0]:
            return s[0]
        if cells_shaded >= b[-1]:
            return s[-1]
        i = bisect.bisect_left(b, cells_shaded)
        if cells_shaded == b[i]:
            return s[i]
        return min(s[i - 1] + s[i] * (cells_shaded - b[i - 1]), s[i])


@dataclass(frozen=True)
class FixedTiltLayout:
    """Single tilted collector plane.

    Parameters
    ----------
    collector_tilt:
        Slope of the collector plane in radians.
    collector_azimuth:
        Azimuth angle of the collector plane in radians; zero due south,
        east negative, west positive.
    """
    collector_tilt: float
    collector_azimuth: float
    shading_limit_angle: float = field(init=False, default=0.0)
    diffuse_shading_fraction: float = field(init=False)
    reflected_shading_fraction: float = field(init=False)

    def __post_init__(self):
        cos_beta = float(np.cos(self.collector_tilt))
        object.__setattr__(self, 'diffuse_shading_fraction', (1 + cos_beta) / 2)
        object.__setattr__(self, 'reflected_shading_fraction', (1 - cos_beta) / 2)

    @property
    def model(self) -> ArrayType:
        return ArrayType.FIXED_TILT


@dataclass(frozen=True)
class UnlimitedRowsLayout:
    """Long parallel rows of collectors, grouped in blocks of rows.

    Parameters
    ----------
    collector_tilt:
        Slope of the collectors in radians.
    collector_azimuth:
        Azimuth angle of the collectors in radians; zero due south, east
        negative, west positive.
    pitch:
        Distance between two successive rows in meters.
    collector_bandwidth:
        Width of a row along its sloped surface in meters.
    shading_limit_angle:
        Shading limit angle in radians (see `pvshading.sun.shading`).
    row_block_count:
        Number of rows in a block. Only the first row of a block is free of
        shading.
    cell_model: optional
        If given, beam shading is evaluated with the step-wise cell model and
        no row-block derating is applied to the beam shading fraction.

    Attributes
    ----------
    row_block_factor:
        Part of the rows in a block that is shaded by the row ahead; 1 when
        the cell model is used.
    diffuse_shading_fraction:
        Fraction of the diffuse irradiance that remains after shading. Derived
        from the row-block fraction of the rows, also when the cell model is
        used.
    reflected_shading_fraction:
        Fraction of the ground-reflected irradiance that remains. Only the
        first row of a block sees the ground in front of the array.
    """
    collector_tilt: float
    collector_azimuth: float
    pitch: float
    collector_bandwidth: float
    shading_limit_angle: float
    row_block_count: int
    cell_model: CellModel | None = None
    row_block_factor: float = field(init=False)
    diffuse_shading_fraction: float = field(init=False)
    reflected_shading_fraction: float = field(init=False)

    def __post_init__(self):
        if self.row_block_count < 1:
            raise ConfigurationError('a block must contain at least 1 row')
        if self.collector_bandwidth <= 0.0:
            raise ConfigurationError('collector bandwidth must be positive')
        rows_shaded = (self.row_block_count - 1) / self.row_block_count
        psi = self.shading_limit_angle
        object.__setattr__(
            self, 'diffuse_shading_fraction',
            rows_shaded * (1 + float(np.cos(psi))) / 2
        )
        object.__setattr__(self, 'reflected_shading_fraction', 1 - rows_shaded)
        if self.cell_model is not None:
            rows_shaded = 1.0
        object.__setattr__(self, 'row_block_factor', rows_shaded)

    @property
    def model(self) -> ArrayType:
        return ArrayType.UNLIMITED_ROWS

    @property
    def geometric_shading_limit_angle(self) -> float:
        """Shading limit angle in radians that follows from the tilt, the
        bandwidth and the pitch of the rows.
        """
        return shading_limit_angle(
            self.collector_tilt,
            self.collector_bandwidth,
            self.pitch
        )


ArrayLayout = FixedTiltLayout | UnlimitedRowsLayout


def _resolve_cell_model(
    settings: SettingsSource,
    bandwidth: float
) -> CellModel | None:
    use_cells = settings.get_bool('UseCellVal', ErrLevel.WARNING, default=False)
    if not use_cells:
        return None
    cell_size = settings.get_length('CellSize', unit='cm')
    num_strings = settings.get_int('StrInWid')
    return CellModel.build(bandwidth, cell_size, num_strings)


def resolve_layout(settings: SettingsSource) -> ArrayLayout:
    """Creates the layout of the collector array from `settings`.

    Settings (keys are case-sensitive):

    - 'ArrayType': 'Unlimited Rows' or 'Fixed Tilted' (any other text
      selects 'Fixed Tilted'; if missing, 'Fixed Tilted' is used with a
      warning)
    - 'PlaneTilt', 'Azimuth': degrees
    - 'Pitch', 'CollBandWidth': meters; only for 'Unlimited Rows'
    - 'ShadingLimit': degrees; only for 'Unlimited Rows'
    - 'RowsBlock': number of rows in a block; only for 'Unlimited Rows'
    - 'UseCellVal': 'true' or 'false' (optional, default 'false')
    - 'CellSize': centimeters; only if 'UseCellVal' is true
    - 'StrInWid': number of strings in the transverse direction; only if
      'UseCellVal' is true

    Raises
    ------
    ConfigurationError
        If a required setting is missing or invalid.
    """
    array_type = ArrayType.parse(settings.get_text(
        'ArrayType', ErrLevel.WARNING, default=ArrayType.FIXED_TILT.value
    ))
    tilt = settings.get_angle('PlaneTilt')
    azimuth = settings.get_angle('Azimuth')

    if array_type is ArrayType.FIXED_TILT:
        layout = FixedTiltLayout(tilt, azimuth)
    else:
        bandwidth = settings.get_length('CollBandWidth')
        layout = UnlimitedRowsLayout(
            collector_tilt=tilt,
            collector_azimuth=azimuth,
            pitch=settings.get_length('Pitch'),
            collector_bandwidth=bandwidth,
            shading_limit_angle=settings.get_angle('ShadingLimit'),
            row_block_count=settings.get_int('RowsBlock'),
            cell_model=_resolve_cell_model(settings, bandwidth)
        )
        psi_geo = layout.geometric_shading_limit_angle
        if abs(psi_geo - layout.shading_limit_angle) > SHADING_LIMIT_TOLERANCE:
            logger.warning(
                f"configured shading limit angle "
                f"{np.degrees(layout.shading_limit_angle):.2f}° differs from "
                f"{np.degrees(psi_geo):.2f}° implied by tilt, bandwidth and "
                f"pitch"
            )
    logger.debug(
        f"{layout.model.value}: diffuse shading fraction = "
        f"{layout.diffuse_shading_fraction:.4f}, reflected shading fraction "
        f"= {layout.reflected_shading_fraction:.4f}"
    )
    return layout

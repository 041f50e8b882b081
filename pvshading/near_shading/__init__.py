from .settings import (
    SettingsSource,
    MappingSettings,
    ErrLevel,
    ConfigurationError,
    DefaultedSettingWarning
)
from .layout import (
    ArrayType,
    ArrayLayout,
    CellModel,
    FixedTiltLayout,
    UnlimitedRowsLayout,
    resolve_layout
)
from .evaluator import (
    ShadingResult,
    shaded_fraction,
    beam_shading_fraction,
    evaluate
)

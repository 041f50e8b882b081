import pytest


@pytest.fixture
def fixed_tilt_settings() -> dict[str, str]:
    return {
        'ArrayType': 'Fixed Tilted',
        'PlaneTilt': '60',
        'Azimuth': '10'
    }


@pytest.fixture
def unlimited_rows_settings() -> dict[str, str]:
    # tilt 30°, bandwidth 2 m, pitch 4 m: shading limit angle ≈ 23.79°
    return {
        'ArrayType': 'Unlimited Rows',
        'PlaneTilt': '30',
        'Azimuth': '0',
        'Pitch': '4',
        'CollBandWidth': '2',
        'ShadingLimit': '23.79',
        'RowsBlock': '10',
        'UseCellVal': 'false'
    }


@pytest.fixture
def cell_settings(unlimited_rows_settings) -> dict[str, str]:
    settings = dict(unlimited_rows_settings)
    settings.update({
        'UseCellVal': 'True',
        'CellSize': '15.6',
        'StrInWid': '2'
    })
    return settings

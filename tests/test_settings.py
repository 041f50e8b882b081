import math

import pytest

from pvshading.near_shading.settings import (
    MappingSettings,
    ErrLevel,
    ConfigurationError,
    DefaultedSettingWarning
)


class TestRequiredSettings:

    def test_missing_key_is_fatal(self):
        settings = MappingSettings({'PlaneTilt': '30'})
        with pytest.raises(ConfigurationError, match='Azimuth'):
            settings.get_text('Azimuth')

    def test_keys_are_case_sensitive(self):
        settings = MappingSettings({'planetilt': '30'})
        with pytest.raises(ConfigurationError):
            settings.get_float('PlaneTilt')

    def test_blank_text_counts_as_missing(self):
        settings = MappingSettings({'Pitch': '   '})
        with pytest.raises(ConfigurationError):
            settings.get_float('Pitch')

    def test_malformed_number_is_fatal(self):
        settings = MappingSettings({'Pitch': '4,5 m'})
        with pytest.raises(ConfigurationError, match='not a number'):
            settings.get_float('Pitch')

    def test_malformed_integer_is_fatal(self):
        settings = MappingSettings({'RowsBlock': '2.5'})
        with pytest.raises(ConfigurationError, match='not an integer'):
            settings.get_int('RowsBlock')

    def test_text_is_stripped(self):
        settings = MappingSettings({'ArrayType': '  Unlimited Rows \n'})
        assert settings.get_text('ArrayType') == 'Unlimited Rows'


class TestOptionalSettings:

    def test_missing_key_uses_default_with_warning(self):
        settings = MappingSettings({})
        with pytest.warns(DefaultedSettingWarning, match='UseCellVal'):
            value = settings.get_bool('UseCellVal', ErrLevel.WARNING, default=False)
        assert value is False

    def test_present_key_issues_no_warning(self, recwarn):
        settings = MappingSettings({'UseCellVal': 'true'})
        assert settings.get_bool('UseCellVal', ErrLevel.WARNING, default=False)
        assert not [w for w in recwarn if w.category is DefaultedSettingWarning]

    def test_missing_key_without_default_is_fatal(self):
        settings = MappingSettings({})
        with pytest.raises(ConfigurationError):
            settings.get_text('CellSize', ErrLevel.WARNING)

    def test_numeric_default(self):
        settings = MappingSettings({})
        with pytest.warns(DefaultedSettingWarning):
            assert settings.get_int('RowsBlock', ErrLevel.WARNING, default=1) == 1


class TestConversions:

    @pytest.mark.parametrize('text, expected', [
        ('true', True), ('True', True), (' FALSE ', False), ('false', False)
    ])
    def test_booleans(self, text, expected):
        assert MappingSettings({'UseCellVal': text}).get_bool('UseCellVal') is expected

    def test_malformed_boolean_is_fatal(self):
        with pytest.raises(ConfigurationError, match='not a boolean'):
            MappingSettings({'UseCellVal': 'yes'}).get_bool('UseCellVal')

    def test_angle_in_degrees_is_returned_in_radians(self):
        settings = MappingSettings({'PlaneTilt': '180'})
        assert settings.get_angle('PlaneTilt') == pytest.approx(math.pi)

    def test_length_in_centimeters_is_returned_in_meters(self):
        settings = MappingSettings({'CellSize': '15.6'})
        assert settings.get_length('CellSize', unit='cm') == pytest.approx(0.156)

    def test_non_string_values(self):
        settings = MappingSettings({'Pitch': 4.5, 'RowsBlock': 10, 'UseCellVal': True})
        assert settings.get_float('Pitch') == 4.5
        assert settings.get_int('RowsBlock') == 10
        assert settings.get_bool('UseCellVal') is True

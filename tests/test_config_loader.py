import pytest

from py_measure import basicConfig, PreferredUnits, loadMetricUnits, loadImperialUnits
from py_measure.dimensions import Length, Speed, Temperature, Pressure


@pytest.fixture
def project_dir(tmp_path, monkeypatch):
    """A project tree with a pymeasure.toml at its root; the CWD is a nested directory."""
    (tmp_path / 'pymeasure.toml').write_text(
        '[pymeasure.preferred_units]\n'
        'length = "yd"\n'
        'speed = "knots"\n',
        encoding='utf-8',
    )
    nested = tmp_path / 'src' / 'pkg'
    nested.mkdir(parents=True)
    monkeypatch.chdir(nested)
    return tmp_path


class TestConfigLoader:

    @pytest.mark.parametrize(
        "test_name, config_func, expected_length, expected_temperature",
        [
            ("manual", lambda: basicConfig(preferred_units={'length': Length.Foot}), Length.Foot, None),
            ("manual_alias", lambda: basicConfig(preferred_units={'length': 'km'}), Length.Kilometer, None),
            ("imperial", loadImperialUnits, Length.Foot, Temperature.Fahrenheit),
            ("metric", loadMetricUnits, Length.Meter, Temperature.Celsius),
        ],
    )
    def test_preferred_units_load(self, test_name, config_func, expected_length, expected_temperature):
        config_func()
        if expected_length:
            assert PreferredUnits.length == expected_length
        if expected_temperature:
            assert PreferredUnits.temperature == expected_temperature

    def test_discovers_config_upwards(self, project_dir):
        basicConfig()
        assert PreferredUnits.length == Length.Yard
        assert PreferredUnits.speed == Speed.Knot

    def test_hidden_config_name(self, tmp_path, monkeypatch):
        (tmp_path / '.pymeasure.toml').write_text(
            '[pymeasure.preferred_units]\npressure = "mmHg"\n', encoding='utf-8')
        monkeypatch.chdir(tmp_path)
        basicConfig()
        assert PreferredUnits.pressure == Pressure.MillimeterOfMercury

    def test_explicit_filename(self, tmp_path):
        config = tmp_path / 'custom.toml'
        config.write_text('[pymeasure.preferred_units]\ntemperature = "°F"\n', encoding='utf-8')
        basicConfig(str(config))
        assert PreferredUnits.temperature == Temperature.Fahrenheit

    def test_filename_and_units_are_exclusive(self, tmp_path):
        with pytest.raises(ValueError):
            basicConfig(str(tmp_path / 'custom.toml'), preferred_units={'length': Length.Foot})

    @pytest.mark.parametrize(
        "content, message",
        [
            ('[other]\nkey = 1\n', "no `pymeasure` section"),
            ('[pymeasure]\nkey = 1\n', "no `pymeasure.preferred_units` section"),
        ],
    )
    def test_missing_sections_warn(self, tmp_path, caplog, content, message):
        config = tmp_path / 'custom.toml'
        config.write_text(content, encoding='utf-8')
        basicConfig(str(config))
        assert message in caplog.text
        assert PreferredUnits.length == Length.Meter

    def test_missing_sections_suppressed(self, tmp_path, caplog):
        config = tmp_path / 'custom.toml'
        config.write_text('[other]\nkey = 1\n', encoding='utf-8')
        basicConfig(str(config), suppress_warnings=True)
        assert "no `pymeasure` section" not in caplog.text

    def test_invalid_values_warn(self, tmp_path, caplog):
        config = tmp_path / 'custom.toml'
        config.write_text('[pymeasure.preferred_units]\nlength = "parsec-ish"\nlength_ = "m"\n',
                          encoding='utf-8')
        basicConfig(str(config))
        assert PreferredUnits.length == Length.Meter
        assert "not a Length unit" in caplog.text
        assert "not found in preferred_units" in caplog.text

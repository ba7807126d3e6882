import json

import pytest

from kale_graph.settings import (
    RenderSettings,
    SettingsError,
    get_default_settings,
    load_settings,
    set_default_settings,
)


def test_defaults_match_plugin_defaults():
    settings = RenderSettings()

    assert settings.big_radius == 145
    assert settings.vertex_radius == 5
    assert settings.edge_thickness == 2
    assert settings.arrow_size == 7
    assert settings.bendiness == 10


def test_from_mapping_accepts_camel_and_snake_case():
    settings = RenderSettings.from_mapping({'bigRadius': 120, 'arrow_size': 9, 'edgeColor': ' #123 '})

    assert settings.big_radius == 120.0
    assert settings.arrow_size == 9.0
    assert settings.edge_color == '#123'
    assert settings.vertex_radius == 5


@pytest.mark.parametrize(
    'data, message_part',
    [
        ({'radius': 3}, "unknown render setting 'radius'"),
        ({'bendiness': 'lots'}, 'must be a number'),
        ({'bendiness': True}, 'must be a number'),
        ({'arrowSize': -1}, 'must not be negative'),
        ({'bigRadius': 0}, 'must be positive'),
        ({'vertexColor': ''}, 'non-empty color string'),
    ],
)
def test_from_mapping_rejects_bad_values(data, message_part):
    with pytest.raises(SettingsError) as exc:
        RenderSettings.from_mapping(data)

    assert message_part in str(exc.value)


def test_load_settings_reads_nested_render_object(tmp_path):
    path = tmp_path / 'data.json'
    path.write_text(json.dumps({'codeBlockKeyword': 'kale', 'render': {'bendiness': 4}}), encoding='utf-8')

    settings = load_settings(path)

    assert settings.bendiness == 4.0
    assert settings.big_radius == 145


def test_load_settings_rejects_invalid_json(tmp_path):
    path = tmp_path / 'broken.json'
    path.write_text('{not json', encoding='utf-8')

    with pytest.raises(SettingsError):
        load_settings(path)


def test_default_settings_are_copied():
    original = get_default_settings()
    try:
        set_default_settings(RenderSettings(bendiness=3))
        assert get_default_settings().bendiness == 3
        assert get_default_settings() is not get_default_settings()
    finally:
        set_default_settings(original)

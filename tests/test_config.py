"""Tests for configuration loading."""

import pytest
import yaml

from config import DEFAULT_CONFIG_PATH, get_config_value, load_config, merge_config
from wordfilter.boundary import AsciiBoundaryPolicy, create_boundary_policy


def test_default_config():
    config = load_config()
    assert DEFAULT_CONFIG_PATH.exists()
    assert get_config_value(config, 'boundary.regime') == 'auto'
    assert get_config_value(config, 'logging.level') == 'INFO'


def test_user_file_merged_over_defaults(tmp_path):
    path = tmp_path / 'wordfilter.yaml'
    path.write_text(yaml.safe_dump({'boundary': {'regime': 'ascii'}}), encoding='utf-8')

    config = load_config(str(path))

    assert get_config_value(config, 'boundary.regime') == 'ascii'
    assert get_config_value(config, 'logging.level') == 'INFO'
    assert isinstance(create_boundary_policy(config), AsciiBoundaryPolicy)


def test_empty_user_file(tmp_path):
    path = tmp_path / 'empty.yaml'
    path.write_text('', encoding='utf-8')
    assert load_config(str(path)) == load_config()


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / 'missing.yaml'))


def test_non_mapping_file(tmp_path):
    path = tmp_path / 'list.yaml'
    path.write_text('- a\n- b\n', encoding='utf-8')
    with pytest.raises(ValueError):
        load_config(str(path))


def test_invalid_yaml(tmp_path):
    path = tmp_path / 'broken.yaml'
    path.write_text('boundary: [unclosed', encoding='utf-8')
    with pytest.raises(yaml.YAMLError):
        load_config(str(path))


def test_get_config_value_default():
    config = {'boundary': {'regime': 'ascii'}}
    assert get_config_value(config, 'boundary.missing', 'x') == 'x'
    assert get_config_value(config, 'boundary.regime.deeper', 'x') == 'x'
    assert get_config_value(config, 'nothing') is None


def test_merge_config_does_not_mutate():
    base = {'a': {'b': 1, 'c': 2}, 'd': 3}
    merged = merge_config(base, {'a': {'b': 10}, 'e': 4})
    assert merged == {'a': {'b': 10, 'c': 2}, 'd': 3, 'e': 4}
    assert base == {'a': {'b': 1, 'c': 2}, 'd': 3}

import json
from pathlib import Path

import pytest

from treedump.config import CONFIG, DBStyleConfigJSON, DumpProfileEntry, load_and_migrate_config


def test_defaults_from_environment() -> None:
	assert CONFIG.name_tag_prefix == '<reacttag>:'
	assert CONFIG.excluded_node_names == frozenset({'VerticalScrollBar', 'HorizontalScrollBar', 'ScrollBarSeparator'})
	assert CONFIG.TREEDUMP_DEFAULT_MODE == 'text'


def test_environment_is_reread_on_access(monkeypatch: pytest.MonkeyPatch) -> None:
	monkeypatch.setenv('TREEDUMP_EXCLUDED_NODE_NAMES', ' Thumb , ,Track')
	assert CONFIG.excluded_node_names == frozenset({'Thumb', 'Track'})
	monkeypatch.setenv('TREEDUMP_DEFAULT_MODE', 'json')
	assert CONFIG.TREEDUMP_DEFAULT_MODE == 'json'


def test_unknown_attribute() -> None:
	with pytest.raises(AttributeError):
		CONFIG.NOT_A_SETTING
	with pytest.raises(AttributeError):
		CONFIG._hidden


def test_config_path_resolution(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
	assert CONFIG.get_config_path() == tmp_path / 'config' / 'config.json'
	monkeypatch.setenv('TREEDUMP_CONFIG_PATH', str(tmp_path / 'custom.json'))
	assert CONFIG.get_config_path() == tmp_path / 'custom.json'
	monkeypatch.delenv('TREEDUMP_CONFIG_PATH')
	monkeypatch.delenv('TREEDUMP_CONFIG_DIR')
	monkeypatch.setenv('XDG_CONFIG_HOME', str(tmp_path / 'xdg'))
	assert CONFIG.get_config_path() == tmp_path / 'xdg' / 'treedump' / 'config.json'


def test_missing_config_is_created(tmp_path: Path) -> None:
	config_path = tmp_path / 'nested' / 'config.json'
	config = load_and_migrate_config(config_path)
	assert config_path.exists()
	profiles = list(config.dump_profile.values())
	assert len(profiles) == 1
	assert profiles[0].default
	assert profiles[0].name == 'default'
	assert json.loads(config_path.read_text())['dump_profile']


def test_old_format_is_replaced(tmp_path: Path) -> None:
	config_path = tmp_path / 'config.json'
	config_path.write_text(json.dumps({'profiles': ['legacy']}))
	config = load_and_migrate_config(config_path)
	assert len(config.dump_profile) == 1
	assert 'legacy' not in config_path.read_text()


def test_unreadable_config_falls_back_to_default(tmp_path: Path) -> None:
	config_path = tmp_path / 'config.json'
	config_path.write_text('{broken')
	config = load_and_migrate_config(config_path)
	assert len(config.dump_profile) == 1


def test_get_profile_by_name() -> None:
	config = DBStyleConfigJSON()
	wide = DumpProfileEntry(name='wide', additional_properties=['Opacity'], mode='json')
	basic = DumpProfileEntry(name='basic', default=True)
	config.dump_profile[wide.id] = wide
	config.dump_profile[basic.id] = basic
	config_path = CONFIG.get_config_path()
	config_path.parent.mkdir(parents=True, exist_ok=True)
	config_path.write_text(json.dumps(config.model_dump()))

	assert CONFIG.get_profile('wide').additional_properties == ['Opacity']
	assert CONFIG.get_profile().name == 'basic'
	assert CONFIG.get_profile('missing') is None

"""Shared test fixtures."""

import os

# Логирование пакета не настраивается при импорте в тестах
os.environ.setdefault('TREEDUMP_SETUP_LOGGING', 'false')

import pytest

from treedump.dump.models import Color, Size, SolidColorBrush


class Element:
	"""Простой узел хост-дерева для рефлексивного адаптера."""

	def __init__(self, Name=None, children=None, automation_id=None, **properties):
		self.Name = Name
		self.children = list(children or [])
		self.automation_id = automation_id
		for property_name, value in properties.items():
			setattr(self, property_name, value)


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch: pytest.MonkeyPatch):
	"""Конфигурация из временной директории, без переопределений из окружения."""
	for variable in (
		'TREEDUMP_CONFIG_PATH',
		'TREEDUMP_NAME_TAG_PREFIX',
		'TREEDUMP_EXCLUDED_NODE_NAMES',
		'TREEDUMP_DEFAULT_MODE',
	):
		monkeypatch.delenv(variable, raising=False)
	monkeypatch.setenv('TREEDUMP_CONFIG_DIR', str(tmp_path / 'config'))


@pytest.fixture
def element_cls() -> type[Element]:
	return Element


@pytest.fixture
def window_tree() -> dict:
	"""Окно с заголовком, кнопкой и служебной полосой прокрутки."""
	return {
		'Type': 'Window',
		'Name': 'main',
		'Width': 800.0,
		'Height': 600.0,
		'children': [
			{
				'Type': 'TextBlock',
				'Text': 'Hello',
				'Foreground': SolidColorBrush(Color(255, 0, 0, 0)),
			},
			{
				'Type': 'Button',
				'AutomationId': 'btn1',
				'RenderSize': Size(120.7, 32.2),
				'Opacity': 0.5,
			},
			{
				'Type': 'ScrollBar',
				'Name': 'VerticalScrollBar',
				'Width': 12.0,
			},
		],
	}

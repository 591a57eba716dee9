"""Конфигурация treedump: переменные окружения и профили дампа в config.json."""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any
from uuid import uuid4

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

DEFAULT_NAME_TAG_PREFIX = '<reacttag>:'
DEFAULT_EXCLUDED_NODE_NAMES = 'VerticalScrollBar,HorizontalScrollBar,ScrollBarSeparator'


class FlatEnvConfig(BaseSettings):
	"""Все переменные окружения в плоском пространстве имен."""

	model_config = SettingsConfigDict(env_file='.env', env_file_encoding='utf-8', case_sensitive=True, extra='allow')

	# Логирование
	TREEDUMP_LOGGING_LEVEL: str = Field(default='info')
	TREEDUMP_DEBUG_LOG_FILE: str | None = Field(default=None)
	TREEDUMP_INFO_LOG_FILE: str | None = Field(default=None)

	# Фильтрация
	TREEDUMP_NAME_TAG_PREFIX: str = Field(default=DEFAULT_NAME_TAG_PREFIX)
	TREEDUMP_EXCLUDED_NODE_NAMES: str = Field(default=DEFAULT_EXCLUDED_NODE_NAMES)
	TREEDUMP_DEFAULT_MODE: str = Field(default='text')

	# Конфигурация путей
	XDG_CONFIG_HOME: str = Field(default='~/.config')
	TREEDUMP_CONFIG_DIR: str | None = Field(default=None)
	TREEDUMP_CONFIG_PATH: str | None = Field(default=None)


class DBStyleEntry(BaseModel):
	"""Запись в стиле базы данных с UUID и метаданными."""

	id: str = Field(default_factory=lambda: str(uuid4()))
	default: bool = Field(default=False)
	created_at: str = Field(default_factory=lambda: datetime.now().isoformat())


class DumpProfileEntry(DBStyleEntry):
	"""Именованный набор аргументов дампа."""

	name: str = 'default'
	additional_properties: list[str] = Field(default_factory=list)
	mode: str | None = None


class DBStyleConfigJSON(BaseModel):
	"""Формат config.json."""

	dump_profile: dict[str, DumpProfileEntry] = Field(default_factory=dict)


def create_default_config() -> DBStyleConfigJSON:
	"""Создать свежую конфигурацию по умолчанию."""
	logger.debug('Creating fresh default config.json')

	default_config = DBStyleConfigJSON()
	default_profile_id = str(uuid4())
	default_config.dump_profile[default_profile_id] = DumpProfileEntry(id=default_profile_id, default=True)
	return default_config


def _write_config(config_file_path: Path, config: DBStyleConfigJSON) -> None:
	config_file_path.parent.mkdir(parents=True, exist_ok=True)
	with open(config_file_path, 'w', encoding='utf-8') as config_file:
		json.dump(config.model_dump(), config_file, indent=2)


def load_and_migrate_config(config_file_path: Path) -> DBStyleConfigJSON:
	"""Загрузка config.json или создание нового, если файл отсутствует или не читается."""
	if not config_file_path.exists():
		fresh_config = create_default_config()
		_write_config(config_file_path, fresh_config)
		return fresh_config

	try:
		with open(config_file_path, encoding='utf-8') as config_file:
			config_data = json.load(config_file)

		# Проверить, что записи профилей имеют UUID
		profiles = config_data.get('dump_profile') if isinstance(config_data, dict) else None
		if isinstance(profiles, dict) and all(isinstance(entry, dict) and 'id' in entry for entry in profiles.values()):
			return DBStyleConfigJSON(**config_data)

		logger.debug(f'Old config format detected at {config_file_path}, creating fresh config')
		fresh_config = create_default_config()
		_write_config(config_file_path, fresh_config)
		return fresh_config

	except Exception as load_error:
		logger.error(f'Failed to load config from {config_file_path}: {load_error}, creating fresh config')
		fresh_config = create_default_config()
		try:
			_write_config(config_file_path, fresh_config)
		except OSError as write_error:
			logger.error(f'Failed to write fresh config: {write_error}')
		return fresh_config


class Config:
	"""Объединяет переменные окружения и config.json.

	Перечитывает переменные окружения при каждом доступе, поэтому тесты и CLI
	могут менять окружение без перезапуска процесса.
	"""

	def __getattr__(self, attribute_name: str) -> Any:
		if attribute_name.startswith('_'):
			raise AttributeError(f"'{self.__class__.__name__}' object has no attribute '{attribute_name}'")

		env_config_instance = FlatEnvConfig()
		if hasattr(env_config_instance, attribute_name):
			return getattr(env_config_instance, attribute_name)

		raise AttributeError(f"'{self.__class__.__name__}' object has no attribute '{attribute_name}'")

	@property
	def excluded_node_names(self) -> frozenset[str]:
		raw_names = FlatEnvConfig().TREEDUMP_EXCLUDED_NODE_NAMES
		return frozenset(name.strip() for name in raw_names.split(',') if name.strip())

	@property
	def name_tag_prefix(self) -> str:
		return FlatEnvConfig().TREEDUMP_NAME_TAG_PREFIX

	def get_config_path(self) -> Path:
		"""Путь к config.json из свежей конфигурации окружения."""
		env_config_instance = FlatEnvConfig()
		if env_config_instance.TREEDUMP_CONFIG_PATH:
			return Path(env_config_instance.TREEDUMP_CONFIG_PATH).expanduser()
		elif env_config_instance.TREEDUMP_CONFIG_DIR:
			return Path(env_config_instance.TREEDUMP_CONFIG_DIR).expanduser() / 'config.json'
		else:
			return Path(env_config_instance.XDG_CONFIG_HOME).expanduser() / 'treedump' / 'config.json'

	def load_config(self) -> DBStyleConfigJSON:
		return load_and_migrate_config(self.get_config_path())

	def get_profile(self, name: str | None = None) -> DumpProfileEntry | None:
		"""Найти профиль по имени; без имени вернуть профиль по умолчанию."""
		db_config_instance = self.load_config()
		profiles = list(db_config_instance.dump_profile.values())
		if name is not None:
			return next((profile for profile in profiles if profile.name == name), None)

		for profile_entry in profiles:
			if profile_entry.default:
				return profile_entry

		# Вернуть первый профиль, если нет по умолчанию
		return profiles[0] if profiles else None


# Create singleton instance
CONFIG = Config()

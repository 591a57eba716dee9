"""
Адаптеры узлов дерева.

Обходчик видит дерево только через узкий контракт `TreeNodeAdapter`: имя типа,
упорядоченные дети, имена и значения свойств, идентичность, automation id.
Здесь же лежат адаптеры для обычных Python-объектов и для вложенных словарей.
"""

import inspect
import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import Any

logger = logging.getLogger(__name__)

AUTOMATION_ID_PROPERTY = 'AutomationId'


class TreeNodeAdapter(ABC):
	"""Обёртка над узлом внешней модели дерева. Узел никогда не изменяется."""

	def __init__(self, target: Any):
		self.target = target

	@abstractmethod
	def type_name(self) -> str: ...

	@abstractmethod
	def children(self) -> Sequence[Any]:
		"""Упорядоченные дети в виде исходных объектов (обходчик адаптирует их сам)."""
		...

	@abstractmethod
	def property_names(self) -> Iterable[str]: ...

	@abstractmethod
	def get_property(self, name: str) -> Any:
		"""Прочитать свойство; может выбросить исключение."""
		...

	def automation_id(self) -> str | None:
		return None

	def element_name(self) -> str | None:
		return None

	def adapt(self, child: Any) -> 'TreeNodeAdapter':
		return adapt_node(child)

	def is_same_node(self, other: Any) -> bool:
		other_target = other.target if isinstance(other, TreeNodeAdapter) else other
		return self.target is other_target

	def read_property(self, name: str) -> Any:
		"""Прочитать свойство, заменив ошибку чтения диагностической строкой."""
		try:
			return self.get_property(name)
		except Exception as e:
			logger.debug(f'Failed to read property {name} of {self.type_name()}: {type(e).__name__}: {e}')
			return f'Exception when reading {name}: {type(e).__name__}: {e}'

	def reflectable_properties(self, name_predicate: Callable[[str], bool] | None = None) -> dict[str, Any]:
		"""Имена и значения свойств; нечитаемые свойства получают строку 'Exception when reading ...'."""
		return {name: self.read_property(name) for name in self.property_names() if name_predicate is None or name_predicate(name)}

	def __repr__(self) -> str:
		return f'{type(self).__name__}({self.type_name()!r})'


def _qualified_type_name(obj: Any) -> str:
	cls = type(obj)
	if cls.__module__ in ('builtins', '__main__'):
		return cls.__qualname__
	return f'{cls.__module__}.{cls.__qualname__}'


class ObjectNode(TreeNodeAdapter):
	"""Рефлексивный адаптер для обычных объектов.

	Свойства: публичные некликабельные атрибуты, включая @property.
	Дети, automation id и имя берутся из атрибутов с настраиваемыми именами.
	"""

	def __init__(
		self,
		target: Any,
		children_attribute: str = 'children',
		automation_id_attribute: str = 'automation_id',
		name_attribute: str = 'Name',
	):
		super().__init__(target)
		self.children_attribute = children_attribute
		self.automation_id_attribute = automation_id_attribute
		self.name_attribute = name_attribute

	def type_name(self) -> str:
		return _qualified_type_name(self.target)

	def _safe_attribute(self, attribute_name: str) -> Any:
		try:
			return getattr(self.target, attribute_name, None)
		except Exception as e:
			logger.debug(f'Failed to read {attribute_name} of {self.type_name()}: {e}')
			return None

	def children(self) -> Sequence[Any]:
		children_value = self._safe_attribute(self.children_attribute)
		if children_value is None:
			return []
		if callable(children_value):
			children_value = children_value()
		return list(children_value)

	def property_names(self) -> Iterable[str]:
		reserved = {self.children_attribute, self.automation_id_attribute}
		for attribute_name in dir(self.target):
			if attribute_name.startswith('_') or attribute_name in reserved:
				continue
			# getattr_static не вызывает геттеры свойств
			static_value = inspect.getattr_static(self.target, attribute_name, None)
			if isinstance(static_value, staticmethod | classmethod) or inspect.isroutine(static_value) or inspect.isclass(static_value):
				continue
			yield attribute_name

	def get_property(self, name: str) -> Any:
		return getattr(self.target, name)

	def automation_id(self) -> str | None:
		automation_id = self._safe_attribute(self.automation_id_attribute)
		return None if automation_id is None else str(automation_id)

	def element_name(self) -> str | None:
		name = self._safe_attribute(self.name_attribute)
		return name if isinstance(name, str) else None

	def adapt(self, child: Any) -> TreeNodeAdapter:
		if isinstance(child, TreeNodeAdapter):
			return child
		return ObjectNode(
			child,
			children_attribute=self.children_attribute,
			automation_id_attribute=self.automation_id_attribute,
			name_attribute=self.name_attribute,
		)


class MappingNode(TreeNodeAdapter):
	"""Адаптер для вложенных словарей вида {'Type': ..., 'children': [...], ...}.

	Все прочие строковые ключи считаются свойствами.
	"""

	def __init__(
		self,
		target: Mapping[str, Any],
		type_key: str = 'Type',
		children_key: str = 'children',
		automation_id_key: str = AUTOMATION_ID_PROPERTY,
		name_key: str = 'Name',
	):
		super().__init__(target)
		self.type_key = type_key
		self.children_key = children_key
		self.automation_id_key = automation_id_key
		self.name_key = name_key

	def type_name(self) -> str:
		return str(self.target.get(self.type_key, 'Object'))

	def children(self) -> Sequence[Any]:
		return list(self.target.get(self.children_key) or [])

	def property_names(self) -> Iterable[str]:
		reserved = {self.type_key, self.children_key, self.automation_id_key}
		return [key for key in self.target if isinstance(key, str) and key not in reserved]

	def get_property(self, name: str) -> Any:
		return self.target[name]

	def automation_id(self) -> str | None:
		automation_id = self.target.get(self.automation_id_key)
		return None if automation_id is None else str(automation_id)

	def element_name(self) -> str | None:
		name = self.target.get(self.name_key)
		return name if isinstance(name, str) else None

	def adapt(self, child: Any) -> TreeNodeAdapter:
		if isinstance(child, Mapping):
			return MappingNode(
				child,
				type_key=self.type_key,
				children_key=self.children_key,
				automation_id_key=self.automation_id_key,
				name_key=self.name_key,
			)
		return adapt_node(child)


def adapt_node(obj: Any) -> TreeNodeAdapter | None:
	"""Подобрать адаптер для объекта; адаптеры возвращаются как есть."""
	if obj is None or isinstance(obj, TreeNodeAdapter):
		return obj
	if isinstance(obj, Mapping):
		return MappingNode(obj)
	return ObjectNode(obj)

# @file purpose: Решает, какие свойства и узлы попадают в дамп

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from treedump.config import DEFAULT_EXCLUDED_NODE_NAMES, DEFAULT_NAME_TAG_PREFIX

if TYPE_CHECKING:
	from treedump.dump.nodes import TreeNodeAdapter

# Свойства, которые попадают в дамп всегда
DEFAULT_PROPERTY_ALLOW_LIST = [
	'Foreground',
	'Background',
	'Padding',
	'Margin',
	'RenderSize',
	'Visibility',
	'CornerRadius',
	'BorderThickness',
	'Width',
	'Height',
	'BorderBrush',
	'VerticalAlignment',
	'HorizontalAlignment',
	'Clip',
	'FlowDirection',
	'Name',
	'Text',
	# 'ActualOffset',
]

# Служебные элементы прокрутки, которые только добавляют шум в снимки
EXCLUDED_NODE_NAMES = frozenset(DEFAULT_EXCLUDED_NODE_NAMES.split(','))

EXCEPTION_SENTINEL_PREFIX = 'Exception'


def _unquoted(value: str) -> str:
	if len(value) >= 2 and value[0] == '"' and value[-1] == '"':
		return value[1:-1]
	return value


class PropertyFilter:
	"""Список разрешённых свойств и правила отсева значений."""

	def __init__(
		self,
		additional_properties: Iterable[str] = (),
		excluded_node_names: Iterable[str] | None = None,
		name_tag_prefix: str = DEFAULT_NAME_TAG_PREFIX,
	):
		self.property_name_allow_list: list[str] = list(DEFAULT_PROPERTY_ALLOW_LIST)
		self.property_name_allow_list.extend(additional_properties)
		self._allowed = frozenset(self.property_name_allow_list)
		self.excluded_node_names = frozenset(excluded_node_names) if excluded_node_names is not None else EXCLUDED_NODE_NAMES
		self.name_tag_prefix = name_tag_prefix

	def should_visit_property(self, property_name: str) -> bool:
		return property_name in self._allowed

	def should_visit_property_value(self, property_value: str | None) -> bool:
		# Значения в JSON уже в кавычках, проверяется их содержимое
		text = _unquoted(property_value) if property_value else property_value
		return bool(text) and text != 'NaN' and not text.startswith(EXCEPTION_SENTINEL_PREFIX)

	def should_visit_name_value(self, raw_value: Any, rendered_value: str) -> bool:
		"""Пустое имя или имя с синтетическим тегом считается отсутствующим."""
		if raw_value is None:
			return False
		name = raw_value if isinstance(raw_value, str) else str(raw_value)
		if name == '' or (self.name_tag_prefix and name.startswith(self.name_tag_prefix)):
			return False
		return self.should_visit_property_value(rendered_value)

	def should_visit_properties_for_node(self, node: 'TreeNodeAdapter | None') -> bool:
		if node is None:
			return False
		return node.element_name() not in self.excluded_node_names

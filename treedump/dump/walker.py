# @file purpose: Обход дерева и выдача событий построителю вывода

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from treedump.config import CONFIG
from treedump.dump.builders import VisualTreeLogger, logger_for_mode
from treedump.dump.filter import PropertyFilter
from treedump.dump.models import DumpTreeMode, PropertyEntry
from treedump.dump.nodes import AUTOMATION_ID_PROPERTY, TreeNodeAdapter, adapt_node
from treedump.dump.translator import PropertyValueTranslator, translator_for_mode

logger = logging.getLogger(__name__)

CHILDREN_ARRAY_NAME = 'children'


@dataclass
class DumpSession:
	"""Состояние одного дампа. Не разделяется между дампами; глубина передаётся параметром."""

	filter: PropertyFilter
	translator: PropertyValueTranslator
	logger: VisualTreeLogger
	excluded_node: Any = None
	visited_nodes: int = 0


class TreeWalker:
	"""Рекурсивный обход в глубину с учётом порядка и признака «последний»."""

	def __init__(self, session: DumpSession):
		self.session = session

	def _is_excluded(self, node: TreeNodeAdapter) -> bool:
		excluded_node = self.session.excluded_node
		return excluded_node is not None and node.is_same_node(excluded_node)

	def get_children(self, node: TreeNodeAdapter) -> list[TreeNodeAdapter]:
		"""Дети, прошедшие фильтр узлов, без исключённого узла."""
		children = []
		for raw_child in node.children():
			child = node.adapt(raw_child) if raw_child is not None else None
			if child is None or not self.session.filter.should_visit_properties_for_node(child):
				continue
			if self._is_excluded(child):
				continue
			children.append(child)
		return children

	def get_properties(self, node: TreeNodeAdapter, automation_id: str | None) -> list[PropertyEntry]:
		"""Отфильтрованные и отсортированные по имени свойства с уже переведёнными значениями."""
		property_filter = self.session.filter
		translator = self.session.translator
		entries = []
		for name, value in node.reflectable_properties(property_filter.should_visit_property).items():
			# Синтетический AutomationId идёт последним и не дублируется
			if name == AUTOMATION_ID_PROPERTY and automation_id is not None:
				continue
			rendered_value = translator.property_value_to_string(name, value)
			if name == 'Name':
				keep = property_filter.should_visit_name_value(value, rendered_value)
			else:
				keep = property_filter.should_visit_property_value(rendered_value)
			if keep:
				entries.append(PropertyEntry(name=name, value=rendered_value))
		entries.sort(key=lambda entry: entry.name)
		return entries

	def walk(self, node: TreeNodeAdapter | None, depth: int = 0, is_last: bool = True) -> None:
		session = self.session
		if node is None or not session.filter.should_visit_properties_for_node(node) or self._is_excluded(node):
			return

		children = self.get_children(node)
		has_children = len(children) != 0
		automation_id = node.automation_id() or None
		properties = self.get_properties(node, automation_id)
		has_properties = bool(properties) or automation_id is not None or has_children

		type_name = node.type_name()
		session.visited_nodes += 1
		session.logger.begin_node(depth, type_name, node, has_properties)

		for index, entry in enumerate(properties):
			is_last_property = index == len(properties) - 1 and not has_children and automation_id is None
			session.logger.log_property(depth + 1, entry.name, entry.value, is_last_property)

		if automation_id is not None:
			rendered_id = session.translator.property_value_to_string(AUTOMATION_ID_PROPERTY, automation_id)
			session.logger.log_property(depth + 1, AUTOMATION_ID_PROPERTY, rendered_id, not has_children)

		if has_children:
			session.logger.begin_array(depth + 1, CHILDREN_ARRAY_NAME)
			for index, child in enumerate(children):
				self.walk(child, depth + 2, index == len(children) - 1)
			session.logger.end_array(depth + 1, CHILDREN_ARRAY_NAME)

		session.logger.end_node(depth, type_name, node, is_last)


def dump_tree(
	root: Any,
	excluded_node: Any = None,
	additional_properties: Iterable[str] = (),
	mode: DumpTreeMode | str = DumpTreeMode.PLAIN_TEXT,
	*,
	excluded_node_names: Iterable[str] | None = None,
	name_tag_prefix: str | None = None,
) -> str:
	"""Снять дамп дерева, начиная с `root`.

	Args:
		root: Корень обхода: `TreeNodeAdapter`, словарь или любой объект
		excluded_node: Узел, который вместе с поддеревом не попадёт в дамп, или None
		additional_properties: Дополнительные имена свойств к базовому списку
		mode: Формат вывода (текст key=value или JSON)
		excluded_node_names: Имена служебных узлов (по умолчанию из CONFIG)
		name_tag_prefix: Префикс синтетических имён (по умолчанию из CONFIG)

	Returns:
		Документ дампа одной строкой
	"""
	dump_mode = DumpTreeMode.parse(mode)
	if isinstance(additional_properties, str):
		additional_properties = [additional_properties]

	property_filter = PropertyFilter(
		additional_properties,
		excluded_node_names=excluded_node_names if excluded_node_names is not None else CONFIG.excluded_node_names,
		name_tag_prefix=name_tag_prefix if name_tag_prefix is not None else CONFIG.name_tag_prefix,
	)
	session = DumpSession(
		filter=property_filter,
		translator=translator_for_mode(dump_mode),
		logger=logger_for_mode(dump_mode),
		excluded_node=excluded_node,
	)

	TreeWalker(session).walk(adapt_node(root))

	logger.debug(f'Dumped {session.visited_nodes} nodes in {dump_mode.value} mode')
	return session.logger.render()

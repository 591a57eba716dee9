# @file purpose: Загрузка дерева из JSON-документа (используется CLI)

import json
import logging
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from treedump.dump.models import Color, CornerRadius, Size, SolidColorBrush, TextHighlighter, TextRange, Thickness
from treedump.dump.nodes import TreeNodeAdapter
from treedump.exceptions import DocumentFormatError

logger = logging.getLogger(__name__)

TYPED_VALUE_KEY = '$type'


class NodeSpec(BaseModel):
	"""Узел дерева в документе.

	{"type": "Grid", "name": "root", "automation_id": "main",
	 "properties": {"Width": 100, "RenderSize": {"$type": "Size", "width": 10.5, "height": 20}},
	 "children": [...]}
	"""

	model_config = ConfigDict(extra='forbid')

	type: str
	name: str | None = None
	automation_id: str | None = None
	properties: dict[str, Any] = Field(default_factory=dict)
	children: list['NodeSpec'] = Field(default_factory=list)


# ========== Typed property values ==========


class ColorValue(BaseModel):
	value: str

	def to_value(self) -> Color:
		return Color.from_hex(self.value)


class SolidColorBrushValue(BaseModel):
	color: str

	def to_value(self) -> SolidColorBrush:
		return SolidColorBrush(Color.from_hex(self.color))


class SizeValue(BaseModel):
	width: float
	height: float

	def to_value(self) -> Size:
		return Size(self.width, self.height)


class ThicknessValue(BaseModel):
	left: float = 0
	top: float = 0
	right: float = 0
	bottom: float = 0

	def to_value(self) -> Thickness:
		return Thickness(self.left, self.top, self.right, self.bottom)


class CornerRadiusValue(BaseModel):
	top_left: float = 0
	top_right: float = 0
	bottom_right: float = 0
	bottom_left: float = 0

	def to_value(self) -> CornerRadius:
		return CornerRadius(self.top_left, self.top_right, self.bottom_right, self.bottom_left)


class TextRangeValue(BaseModel):
	start_index: int
	length: int

	def to_value(self) -> TextRange:
		return TextRange(self.start_index, self.length)


class TextHighlighterValue(BaseModel):
	background: str | None = None
	ranges: list[TextRangeValue] = Field(default_factory=list)

	def to_value(self) -> TextHighlighter:
		background = SolidColorBrush(Color.from_hex(self.background)) if self.background else None
		return TextHighlighter(background=background, ranges=[text_range.to_value() for text_range in self.ranges])


TYPED_VALUE_MODELS: dict[str, type[BaseModel]] = {
	'Color': ColorValue,
	'SolidColorBrush': SolidColorBrushValue,
	'Size': SizeValue,
	'Thickness': ThicknessValue,
	'CornerRadius': CornerRadiusValue,
	'TextRange': TextRangeValue,
	'TextHighlighter': TextHighlighterValue,
}


def decode_value(raw_value: Any) -> Any:
	"""Превратить {"$type": ...} в значение хост-типа; остальное вернуть как есть."""
	if isinstance(raw_value, list):
		return [decode_value(item) for item in raw_value]
	if not isinstance(raw_value, dict) or TYPED_VALUE_KEY not in raw_value:
		return raw_value

	payload = dict(raw_value)
	kind = payload.pop(TYPED_VALUE_KEY)
	value_model = TYPED_VALUE_MODELS.get(kind)
	if value_model is None:
		raise ValueError(f'Unknown typed value {kind!r}, expected one of {sorted(TYPED_VALUE_MODELS)}')
	return value_model.model_validate(payload).to_value()


class SpecNode(TreeNodeAdapter):
	"""Адаптер для `NodeSpec`. Типизированные значения разбираются при чтении свойства."""

	target: NodeSpec

	def type_name(self) -> str:
		return self.target.type

	def children(self) -> Sequence[NodeSpec]:
		return self.target.children

	def property_names(self) -> Iterable[str]:
		names = list(self.target.properties)
		if self.target.name is not None and 'Name' not in self.target.properties:
			names.append('Name')
		return names

	def get_property(self, name: str) -> Any:
		if name == 'Name' and name not in self.target.properties:
			return self.target.name
		return decode_value(self.target.properties[name])

	def automation_id(self) -> str | None:
		return self.target.automation_id

	def element_name(self) -> str | None:
		return self.target.name

	def adapt(self, child: Any) -> TreeNodeAdapter:
		return SpecNode(child)


def parse_tree_document(text: str, source: str | None = None) -> NodeSpec:
	try:
		document = json.loads(text)
	except json.JSONDecodeError as e:
		raise DocumentFormatError(f'invalid JSON: {e}', source) from e
	try:
		node_spec = NodeSpec.model_validate(document)
	except ValidationError as e:
		raise DocumentFormatError(f'invalid tree document: {e}', source) from e
	_validate_typed_values(node_spec, source)
	return node_spec


def _validate_typed_values(node_spec: NodeSpec, source: str | None) -> None:
	"""Ошибки в значениях с $type относятся к документу, а не к чтению свойства."""
	pending = [node_spec]
	while pending:
		current = pending.pop()
		for name, raw_value in current.properties.items():
			try:
				decode_value(raw_value)
			except ValueError as e:
				raise DocumentFormatError(f'invalid value of {current.type}.{name}: {e}', source) from e
		pending.extend(current.children)


def load_tree_document(path: Path) -> SpecNode:
	"""Прочитать файл дерева и вернуть адаптер корня."""
	logger.debug(f'Loading tree document from {path}')
	try:
		text = path.read_text(encoding='utf-8')
	except OSError as e:
		raise DocumentFormatError(f'cannot read file: {e}', str(path)) from e
	return SpecNode(parse_tree_document(text, str(path)))

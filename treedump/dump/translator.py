# @file purpose: Переводит значения свойств в стабильные строки для текстового и JSON-вывода

import json
import math
import re
from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping, Set
from enum import Enum
from typing import Any

from treedump.dump.models import Color, DumpTreeMode, Size, SolidColorBrush, TextHighlighter, TextRange, format_number

# Астральные символы (эмодзи) и одиночные суррогаты
_SURROGATE_PATTERN = re.compile('[\U00010000-\U0010ffff\ud800-\udfff]')
_CONTROL_PATTERN = re.compile('[\x00-\x08\x0b-\x1f]')


def quote(text: str) -> str:
	"""Экранировать строку как строковый литерал JSON.

	Табуляции заменяются пробелами, переводы строк становятся '\\n',
	эмодзи и суррогаты удаляются, кавычки экранируются.
	"""
	text = text.replace('\\', '\\\\')
	text = text.replace('\t', ' ').replace('\r', '\\r').replace('\n', '\\n')
	text = _SURROGATE_PATTERN.sub('', text)
	text = _CONTROL_PATTERN.sub(lambda match: f'\\u{ord(match.group()):04x}', text)
	return '"' + text.replace('"', '\\"') + '"'


def _truncated_size(size: Size, quote_non_finite: bool = False) -> str:
	# comparing floats is numerically unstable so just compare their integer parts
	components = []
	for component in (size.width, size.height):
		if math.isfinite(component):
			components.append(str(int(component)))
		else:
			rendered = format_number(component)
			components.append(quote(rendered) if quote_non_finite else rendered)
	return f'[{components[0]}, {components[1]}]'


def _color_of(value: Color | SolidColorBrush) -> str:
	return str(value.color if isinstance(value, SolidColorBrush) else value)


class PropertyValueTranslator(ABC):
	"""Переводит произвольное значение свойства в каноническую строку."""

	mode: DumpTreeMode

	@abstractmethod
	def property_value_to_string(self, property_name: str | None, property_object: Any) -> str: ...


class DefaultPropertyValueTranslator(PropertyValueTranslator):
	mode = DumpTreeMode.PLAIN_TEXT

	def property_value_to_string(self, property_name: str | None, property_object: Any) -> str:
		if property_object is None:
			return '[NULL]'

		if isinstance(property_object, Enum):
			return property_object.name
		elif isinstance(property_object, bool):
			return str(property_object)
		elif isinstance(property_object, int | float):
			return format_number(property_object)
		elif isinstance(property_object, Color | SolidColorBrush):
			return _color_of(property_object)
		elif isinstance(property_object, Size):
			return _truncated_size(property_object)
		elif isinstance(property_object, Set):
			items = sorted(self.property_value_to_string(None, item) for item in property_object)
			return '{' + ', '.join(items) + '}'
		return str(property_object)


class JsonPropertyValueTranslator(PropertyValueTranslator):
	mode = DumpTreeMode.STRUCTURED

	def property_value_to_string(self, property_name: str | None, property_object: Any) -> str:
		if property_object is None:
			return 'null'
		elif isinstance(property_object, Enum):
			return quote(property_object.name)
		elif isinstance(property_object, bool):
			return 'true' if property_object else 'false'
		elif isinstance(property_object, int | float):
			rendered = format_number(property_object)
			# NaN свойства остаётся голым, чтобы его отсеял фильтр значений;
			# внутри коллекций фильтра нет, поэтому там он в кавычках
			if rendered in ('Infinity', '-Infinity') or (rendered == 'NaN' and property_name is None):
				return quote(rendered)
			return rendered
		elif isinstance(property_object, Color | SolidColorBrush):
			return quote(_color_of(property_object))
		elif isinstance(property_object, Size):
			return _truncated_size(property_object, quote_non_finite=True)
		elif isinstance(property_object, TextHighlighter):
			background = self.property_value_to_string(None, property_object.background)
			ranges = self.property_value_to_string(None, property_object.ranges)
			return f'{{\n"Background": {background},\n"Ranges": {ranges}\n}}\n'
		elif isinstance(property_object, TextRange):
			return json.dumps({'StartIndex': property_object.start_index, 'Length': property_object.length})
		elif isinstance(property_object, str):
			return quote(property_object)
		elif isinstance(property_object, Iterable) and not isinstance(property_object, bytes | bytearray | Mapping):
			items = [self.property_value_to_string(None, item) for item in property_object]
			if isinstance(property_object, Set):
				# порядок множеств не стабилен между запусками
				items.sort()
			return '[' + ','.join(items) + ']'
		return quote(str(property_object))


def translator_for_mode(mode: DumpTreeMode) -> PropertyValueTranslator:
	if mode == DumpTreeMode.STRUCTURED:
		return JsonPropertyValueTranslator()
	return DefaultPropertyValueTranslator()

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from treedump.exceptions import InvalidDumpModeError

# ========== Helper Functions ==========


def format_number(value: int | float) -> str:
	"""Стабильное текстовое представление числа.

	Целые float печатаются без дробной части (100.0 -> '100'), NaN как 'NaN',
	бесконечности как 'Infinity' / '-Infinity'.
	"""
	if isinstance(value, int):
		return str(value)
	if math.isnan(value):
		return 'NaN'
	if math.isinf(value):
		return 'Infinity' if value > 0 else '-Infinity'
	if value.is_integer():
		return str(int(value))
	return repr(value)


# ========== Models ==========


class DumpTreeMode(str, Enum):
	"""Формат вывода дампа."""

	PLAIN_TEXT = 'text'
	"""Формат key=value"""
	STRUCTURED = 'json'
	"""Формат JSON"""

	@classmethod
	def parse(cls, value: 'str | DumpTreeMode') -> 'DumpTreeMode':
		if isinstance(value, cls):
			return value
		normalized = str(value).strip().lower()
		aliases = {
			'text': cls.PLAIN_TEXT,
			'plain': cls.PLAIN_TEXT,
			'plaintext': cls.PLAIN_TEXT,
			'default': cls.PLAIN_TEXT,
			'json': cls.STRUCTURED,
			'structured': cls.STRUCTURED,
		}
		if normalized not in aliases:
			raise InvalidDumpModeError(value)
		return aliases[normalized]


@dataclass(frozen=True, slots=True)
class PropertyEntry:
	name: str
	value: Any


@dataclass(frozen=True, slots=True)
class Color:
	a: int
	r: int
	g: int
	b: int

	@classmethod
	def from_hex(cls, text: str) -> 'Color':
		"""Разобрать '#RRGGBB' или '#AARRGGBB'."""
		digits = text.lstrip('#')
		if len(digits) == 6:
			digits = 'FF' + digits
		if len(digits) != 8:
			raise ValueError(f'Invalid color literal: {text!r}')
		a, r, g, b = (int(digits[i : i + 2], 16) for i in range(0, 8, 2))
		return cls(a=a, r=r, g=g, b=b)

	def __str__(self) -> str:
		return f'#{self.a:02X}{self.r:02X}{self.g:02X}{self.b:02X}'


@dataclass(frozen=True, slots=True)
class SolidColorBrush:
	color: Color

	def __str__(self) -> str:
		return str(self.color)


@dataclass(frozen=True, slots=True)
class Size:
	width: float
	height: float


@dataclass(frozen=True, slots=True)
class Thickness:
	left: float
	top: float
	right: float
	bottom: float

	def __str__(self) -> str:
		return ','.join(format_number(v) for v in (self.left, self.top, self.right, self.bottom))


@dataclass(frozen=True, slots=True)
class CornerRadius:
	top_left: float
	top_right: float
	bottom_right: float
	bottom_left: float

	def __str__(self) -> str:
		return ','.join(format_number(v) for v in (self.top_left, self.top_right, self.bottom_right, self.bottom_left))


@dataclass(frozen=True, slots=True)
class TextRange:
	start_index: int
	length: int


@dataclass(slots=True)
class TextHighlighter:
	"""Подсветка диапазонов текста одной кистью."""

	background: SolidColorBrush | None = None
	ranges: list[TextRange] = field(default_factory=list)

"""Построители вывода: текстовый key=value и JSON."""

from treedump.dump.models import DumpTreeMode

from .base import VisualTreeLogger
from .json_logger import JsonVisualTreeLogger
from .text_logger import DefaultVisualTreeLogger

__all__ = ['DefaultVisualTreeLogger', 'JsonVisualTreeLogger', 'VisualTreeLogger', 'logger_for_mode']


def logger_for_mode(mode: DumpTreeMode) -> VisualTreeLogger:
	if mode == DumpTreeMode.STRUCTURED:
		return JsonVisualTreeLogger()
	return DefaultVisualTreeLogger()

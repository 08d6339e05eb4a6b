import json
import logging
import sys
from datetime import UTC, date, datetime
from decimal import Decimal

from exchangerates.config.settings import get_settings

PACKAGE_LOGGER = 'exchangerates'

_RECORD_ATTRIBUTES = frozenset(vars(logging.LogRecord('', 0, '', 0, '', (), None))) | {'message', 'asctime'}


def resolve_level(level: str) -> int:
	levels = logging.getLevelNamesMapping()
	level_name = level.strip().upper()
	if level_name not in levels:
		raise ValueError(f'Unknown log level {level!r}; expected one of {", ".join(sorted(levels))}')
	return levels[level_name]


class LogRecordEncoder(json.JSONEncoder):
	"""Encodes the values callers pass through ``extra=``: dates, rates and URLs."""

	def default(self, o):
		if isinstance(o, (datetime, date)):
			return o.isoformat()
		if isinstance(o, Decimal):
			return str(o)
		if isinstance(o, (set, frozenset)):
			return sorted(o)
		return str(o)


class JSONFormatter(logging.Formatter):
	"""One JSON object per line; anything given via ``extra=`` lands under ``data``."""

	def format(self, record: logging.LogRecord) -> str:
		entry = {
			'time': datetime.fromtimestamp(record.created, tz=UTC).isoformat(timespec='milliseconds'),
			'level': record.levelname,
			'logger': record.name,
			'message': record.getMessage(),
			'where': f'{record.module}.{record.funcName}:{record.lineno}',
		}

		data = {key: value for key, value in vars(record).items() if key not in _RECORD_ATTRIBUTES}
		if data:
			entry['data'] = data

		if record.exc_info:
			entry['error'] = {
				'type': record.exc_info[0].__name__,
				'message': str(record.exc_info[1]),
				'traceback': self.formatException(record.exc_info),
			}

		return json.dumps(entry, ensure_ascii=False, cls=LogRecordEncoder)


def configure_logging(level: str | None = None, json_output: bool = False, stream=None) -> logging.Logger:
	"""Attach a single stdout handler to the package logger.

	Applications that already configure the root logger do not need this; the
	package only ever logs through ``logging.getLogger(__name__)``.
	"""
	package_logger = logging.getLogger(PACKAGE_LOGGER)
	package_logger.setLevel(resolve_level(level or get_settings().LOG_LEVEL))
	package_logger.handlers.clear()

	logging.getLogger('httpx').setLevel(logging.WARNING)

	handler = logging.StreamHandler(stream or sys.stdout)
	if json_output:
		handler.setFormatter(JSONFormatter())
	else:
		handler.setFormatter(
			logging.Formatter('%(asctime)s | %(levelname)-8s | %(name)-20s | %(message)s', datefmt='%H:%M:%S')
		)
	package_logger.addHandler(handler)
	return package_logger

"""Domain error taxonomy shared by services and routers."""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError


class RecordValidationError(ValueError):
	"""A record field is malformed or outside its declared domain.

	``errors`` holds one entry per violation with ``field`` (dotted path,
	batch index first when raised from a batch), ``constraint`` and
	``message``.
	"""

	def __init__(self, errors: list[dict[str, Any]]):
		self.errors = errors
		first = errors[0] if errors else {"field": "?", "message": "invalid record"}
		super().__init__(f"{first['field']}: {first['message']}")

	@classmethod
	def from_pydantic(cls, exc: ValidationError, prefix: tuple[Any, ...] = ()) -> RecordValidationError:
		errors = [
			{
				"field": ".".join(str(part) for part in (*prefix, *item["loc"])),
				"constraint": item["type"],
				"message": item["msg"],
			}
			for item in exc.errors()
		]
		return cls(errors)


class RepositoryError(RuntimeError):
	"""The backing store failed to answer a read or accept a write."""

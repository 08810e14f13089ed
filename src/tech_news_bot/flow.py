"""Named, schema-checked async callables.

A :class:`Flow` validates its input against one pydantic model, awaits a
handler, and validates the handler's result against another model before
handing it back. Callers therefore only ever see output that matches the
declared schema, or an exception.
"""

import logging
from collections.abc import Awaitable, Callable, Mapping
from typing import Any, Generic, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from tech_news_bot.errors import OutputValidationError, ValidationError

logger = logging.getLogger(__name__)

InputT = TypeVar("InputT", bound=BaseModel)
OutputT = TypeVar("OutputT", bound=BaseModel)


def _describe(exc: PydanticValidationError) -> str:
    """Summarize pydantic errors as ``field: message`` pairs."""
    parts = []
    for error in exc.errors():
        loc = ".".join(str(p) for p in error["loc"]) or "<root>"
        parts.append(f"{loc}: {error['msg']}")
    return "; ".join(parts)


class Flow(Generic[InputT, OutputT]):
    """An async handler wrapped in input and output schema checks."""

    def __init__(
        self,
        name: str,
        *,
        input_model: type[InputT],
        output_model: type[OutputT],
        handler: Callable[[InputT], Awaitable[Any]],
    ) -> None:
        self.name = name
        self.input_model = input_model
        self.output_model = output_model
        self._handler = handler

    def validate_input(self, raw: Mapping[str, Any] | InputT) -> InputT:
        """Return ``raw`` as an ``input_model`` instance or raise :class:`ValidationError`."""
        if isinstance(raw, self.input_model):
            return raw
        try:
            return self.input_model.model_validate(raw)
        except PydanticValidationError as exc:
            msg = f"Invalid input for {self.name}: {_describe(exc)}"
            raise ValidationError(msg) from exc

    def validate_output(self, result: Any) -> OutputT:
        """Return ``result`` as an ``output_model`` instance or raise :class:`OutputValidationError`."""
        try:
            if isinstance(result, self.output_model):
                return self.output_model.model_validate(result.model_dump())
            return self.output_model.model_validate(result)
        except PydanticValidationError as exc:
            msg = f"{self.name} produced invalid output: {_describe(exc)}"
            raise OutputValidationError(msg) from exc

    async def run(self, raw: Mapping[str, Any] | InputT) -> OutputT:
        """Validate ``raw``, await the handler, and validate its result."""
        validated = self.validate_input(raw)
        logger.debug("Running flow %s", self.name)
        result = await self._handler(validated)
        return self.validate_output(result)

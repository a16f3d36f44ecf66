"""Photo-based food identification using LLMs."""

import base64
import logging
import re
from dataclasses import dataclass, field
from typing import Protocol

from pydantic import ValidationError

from nutriai.domain.nutrition import FoodItem
from nutriai.domain.vision import FoodIdentification
from nutriai.services.catalog import FoodCatalog

_logger = logging.getLogger(__name__)

IDENTIFICATION_PROMPT = (
    "Analyze this food image and identify the dish. "
    'Return ONLY the food name in English in this exact format: "Food: [name]". '
    "Be concise and use common English food names."
)

IDENTIFICATION_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {"food": {"type": "string"}},
    "required": ["food"],
    "additionalProperties": False,
}

FAILURE_NOTICE = "Failed to analyze image. Please try again or search manually."

_FOOD_PREFIX = re.compile(r"^\s*food:\s*", re.IGNORECASE)


class FoodIdentificationError(RuntimeError):
    """Raised when an image cannot be turned into a food label."""


class VisionClient(Protocol):
    """Interface for LLM vision extraction."""

    async def extract(  # noqa: PLR0913
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        image_data_url: str,
        schema: dict[str, object],
        prompt: str,
    ) -> dict[str, object]:
        """Return structured vision extraction data."""


@dataclass(frozen=True)
class ScanResult:
    """Outcome of identifying a photo against the catalog."""

    label: str | None
    match: FoodItem | None
    candidates: list[FoodItem] = field(default_factory=list)
    notice: str | None = None


@dataclass
class FoodIdentificationService:
    """Service that identifies foods in photos and matches them to the catalog."""

    client: VisionClient
    catalog: FoodCatalog
    model: str
    reasoning_effort: str | None
    store: bool

    async def identify(self, image_bytes: bytes) -> str:
        """Return a best-guess food name for an image."""
        if not image_bytes:
            raise FoodIdentificationError("Image payload is empty")
        try:
            raw = await self.client.extract(
                model=self.model,
                reasoning_effort=self.reasoning_effort,
                store=self.store,
                image_data_url=_to_data_url(image_bytes),
                schema=IDENTIFICATION_SCHEMA,
                prompt=IDENTIFICATION_PROMPT,
            )
            result = FoodIdentification.model_validate(raw)
        except ValidationError as exc:
            raise FoodIdentificationError("Unexpected identification payload") from exc
        except Exception as exc:
            raise FoodIdentificationError(str(exc)) from exc
        label = clean_label(result.food)
        if not label:
            raise FoodIdentificationError("Identification returned an empty label")
        return label

    async def scan(self, image_bytes: bytes) -> ScanResult:
        """Identify an image and resolve it against the catalog.

        Failures and unmatched labels produce a notice pointing the user
        to manual search instead of raising.
        """
        try:
            label = await self.identify(image_bytes)
        except FoodIdentificationError:
            _logger.exception("Food identification failed")
            return ScanResult(label=None, match=None, notice=FAILURE_NOTICE)

        match = self.catalog.match_label(label)
        if match is not None:
            return ScanResult(label=label, match=match)
        return ScanResult(
            label=label,
            match=None,
            candidates=self.catalog.search(label),
            notice=(
                f"Found: {label}. Please select from the list or search manually."
            ),
        )


def clean_label(text: str) -> str:
    """Strip the ``Food:`` prefix and surrounding quotes from a label."""
    return _FOOD_PREFIX.sub("", text).strip().strip('"').strip()


def _to_data_url(image_bytes: bytes) -> str:
    """Convert bytes to a base64 data URL for image input."""
    mime_type = _detect_mime_type(image_bytes)
    encoded = base64.b64encode(image_bytes).decode("utf-8")
    return f"data:{mime_type};base64,{encoded}"


def _detect_mime_type(image_bytes: bytes) -> str:
    """Infer a basic image MIME type from file signatures."""
    if image_bytes.startswith(b"\xff\xd8\xff"):
        return "image/jpeg"
    if image_bytes.startswith(b"\x89PNG\r\n\x1a\n"):
        return "image/png"
    if image_bytes[:4] == b"RIFF" and image_bytes[8:12] == b"WEBP":
        return "image/webp"
    return "image/jpeg"

"""SuggestPortionsQuery - common portion options around a serving."""

from dataclasses import dataclass
from typing import List

from burnfit.application.nutrition.models import ServingSizeOutput
from burnfit.domain.nutrition.services.quantity_converter import QuantityConverter


@dataclass(frozen=True)
class SuggestPortionsQuery:
    """
    Query: portion suggestions.

    Attributes:
        serving_text: Base serving (e.g. "1 slice"); unparseable text
            falls back to 100g
    """

    serving_text: str


class SuggestPortionsQueryHandler:
    def __init__(self, converter: QuantityConverter):
        self._converter = converter

    async def handle(self, query: SuggestPortionsQuery) -> List[ServingSizeOutput]:
        base = self._converter.parse_serving_string(query.serving_text)
        return [
            ServingSizeOutput.from_domain(serving, self._converter.locale)
            for serving in self._converter.get_suggested_servings(base)
        ]

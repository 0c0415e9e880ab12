from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import BaseModel

from octo_connector.application.interfaces.translator import Translator


def project(data: Any, query: Any) -> Any:
    """
    Keep only the fields named by ``query``.

    ``None`` keeps everything, an iterable of names keeps those keys, and a
    mapping selects nested fields (``{"options": {"optionId": True}}``).
    Lists are projected element by element.
    """
    if query is None or data is None:
        return data
    if isinstance(data, list):
        return [project(item, query) for item in data]
    if not isinstance(data, Mapping):
        return data
    if isinstance(query, Mapping):
        projected = {}
        for key, sub_query in query.items():
            if key not in data:
                continue
            projected[key] = data[key] if sub_query is True else project(data[key], sub_query)
        return projected
    if isinstance(query, Iterable) and not isinstance(query, str):
        return {key: data[key] for key in query if key in data}
    return data


class PydanticTranslator(Translator):
    """
    Translator whose ``type_defs`` are pydantic models.

    The model's ``mode="before"`` validators reshape the raw supplier JSON;
    translation variables reach them through the validation context.
    """

    def translate(
        self,
        root_value: Any,
        type_defs: type[BaseModel],
        query: Any = None,
        variables: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        model = type_defs.model_validate(root_value, context=variables or {})
        return project(model.model_dump(by_alias=True), query)

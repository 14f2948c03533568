from typing import Any, Dict, Mapping, Optional, Type

from pydantic import BaseModel, ConfigDict

from uploader.data.options import PropertyNamingPolicy, SerializationOptions

# Properties Cosmos DB adds to every stored item
SYSTEM_FIELDS = ("_rid", "_self", "_etag", "_attachments", "_ts")


def to_camel_case(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(p[:1].upper() + p[1:] for p in rest)


class CamelModel(BaseModel):
    """Base model whose fields read and write camelCase document keys."""
    model_config = ConfigDict(alias_generator=to_camel_case, populate_by_name=True)


class DocumentSerializer:
    """
    Applies the uploader's serialization policy to documents.

    azure-cosmos sends plain dicts as JSON, so null-dropping and property
    renaming happen here before an item is handed to a container.
    """

    def __init__(self, options: Optional[SerializationOptions] = None):
        self.options = options or SerializationOptions()

    def _rename(self, key):
        if not isinstance(key, str) or key.startswith("_"):
            return key
        if self.options.property_naming_policy == PropertyNamingPolicy.CAMEL_CASE:
            return to_camel_case(key)
        return key

    def _shape(self, value):
        if isinstance(value, BaseModel):
            value = value.model_dump(mode="json", by_alias=True)
        if isinstance(value, Mapping):
            return {
                self._rename(k): self._shape(v)
                for k, v in value.items()
                if not (v is None and self.options.ignore_null_values)
            }
        if isinstance(value, (list, tuple)):
            return [self._shape(v) for v in value]
        return value

    def to_document(self, obj) -> Dict[str, Any]:
        if not isinstance(obj, (Mapping, BaseModel)):
            raise TypeError(f"Cannot serialize {type(obj).__name__} to a document")
        return self._shape(obj)

    def from_document(self, doc: Mapping[str, Any], model: Optional[Type[BaseModel]] = None):
        body = {k: v for k, v in doc.items() if k not in SYSTEM_FIELDS}
        if model is not None:
            return model.model_validate(body)
        return body

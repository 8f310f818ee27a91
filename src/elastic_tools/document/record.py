"""Record types that can be mapped onto an index."""

from typing import Any, ClassVar, Protocol, TypeVar

from pydantic import BaseModel, ConfigDict

T = TypeVar("T", bound="DocumentRecord")


class DocumentRecord(Protocol):
    """What a record type provides to be used with ``DocumentAPI``.

    - ``doc_type``: the document type label within the index
    - ``es_index()``: the logical index name (fixed or derived)
    - ``from_hit(id, source)``: build a record from a hit's id and ``_source``
    """

    doc_type: ClassVar[str]

    @classmethod
    def es_index(cls) -> str:
        ...

    @classmethod
    def from_hit(cls: type[T], id: str, source: dict[str, Any]) -> T:
        ...


class ElasticDocument(BaseModel):
    """Base class implementing ``DocumentRecord`` with pydantic.

    Declare the document type and index as class variables and the document
    fields as model fields:

        class Answer(ElasticDocument):
            doc_type: ClassVar[str] = "answer"
            index_name: ClassVar[str] = "answer"

            text: str = ""

    For a derived index name (per tenant, per environment) override
    ``es_index``:

        class TenantAnswer(Answer):
            @classmethod
            def es_index(cls) -> str:
                return f"answer_{current_tenant()}"
    """

    model_config = ConfigDict(extra="ignore")

    doc_type: ClassVar[str]
    index_name: ClassVar[str]

    id: str | None = None

    @classmethod
    def es_index(cls) -> str:
        return cls.index_name

    @classmethod
    def from_hit(cls, id: str, source: dict[str, Any]):
        """Project a hit onto this type.

        Source keys that are not fields are dropped, fields missing from the
        source keep their defaults, and ``id`` always comes from the hit.
        Stored values are taken as they are, without validation: a value
        whose type differs from the field annotation is kept, not rejected.
        """
        fields = cls.model_fields
        values = {key: value for key, value in (source or {}).items() if key in fields}
        values["id"] = id
        return cls.model_construct(**values)

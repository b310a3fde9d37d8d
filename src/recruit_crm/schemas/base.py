"""Shared pieces of the request and document schemas."""

from typing import Optional, Sequence, Type, TypeVar

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from recruit_crm.core.errors import StoreError
from recruit_crm.store.base import Document

DocumentModelType = TypeVar("DocumentModelType", bound="DocumentModel")


def check_choice(value: Optional[str], choices: Sequence[str], label: str = "Status") -> Optional[str]:
    """Validate an enumerated string field, letting None through."""
    if value is not None and value not in choices:
        raise ValueError(f'{label} must be one of: {", ".join(choices)}')
    return value


class DocumentModel(BaseModel):
    """Base for stored documents read back from the store.

    Validation happens at this boundary so a malformed stored document
    fails loudly instead of producing half-empty JSON.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str

    @classmethod
    def from_document(cls: Type[DocumentModelType], document: Document) -> DocumentModelType:
        try:
            return cls.model_validate(document.to_dict())
        except PydanticValidationError as e:
            raise StoreError(
                f"Malformed {cls.__name__} document {document.id}",
                original_error=e
            ) from e


class SnakeCaseDocument(DocumentModel):
    """Document exposed with snake_case keys; stored tenant/timestamp keys are camelCase."""

    user_id: str = Field(..., validation_alias=AliasChoices("userId", "user_id"))
    created_at: Optional[str] = Field(None, validation_alias=AliasChoices("createdAt", "created_at"))
    updated_at: Optional[str] = Field(None, validation_alias=AliasChoices("updatedAt", "updated_at"))

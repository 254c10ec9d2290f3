"""
Pydantic schemas for alumni records.

Two shapes exist for the same entity.  ``AlumniRecord`` is the
internal representation used by the services and uses snake_case
field names.  ``AlumniDocument`` is the external representation: it
is what the backing JSON file stores and what every record-bearing
response returns, keyed ``ID, Name, Department, Year, Email, Phone,
Address, Job, Company, CGPA``.  The two are converted with
``to_record`` and ``to_document``; nothing else should reach across.

Missing or ``null`` fields in an external document fall back to the
zero value of their type.  ``CGPA`` must be a finite number.
"""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class AlumniRecord(BaseModel):
    """Internal alumni record."""

    id: int = 0
    name: str = ""
    department: str = ""
    year: int = 0
    email: str = ""
    phone: str = ""
    address: str = ""
    job: str = ""
    company: str = ""
    cgpa: float = Field(0.0, allow_inf_nan=False)


class AlumniDocument(BaseModel):
    """External alumni record as stored on disk and sent over the wire.

    Parsing accepts the Title-case keys as well as the internal field
    names, so clients posting ``{"name": ...}`` are understood too.
    Numbers found in text fields (a phone stored as ``5550100``) are
    read as strings.
    """

    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    id: int = Field(0, alias="ID")
    name: str = Field("", alias="Name")
    department: str = Field("", alias="Department")
    year: int = Field(0, alias="Year")
    email: str = Field("", alias="Email")
    phone: str = Field("", alias="Phone")
    address: str = Field("", alias="Address")
    job: str = Field("", alias="Job")
    company: str = Field("", alias="Company")
    cgpa: float = Field(0.0, alias="CGPA", allow_inf_nan=False)

    @field_validator("*", mode="before")
    @classmethod
    def null_to_default(cls, v: Any, info: ValidationInfo) -> Any:
        if v is None:
            return cls.model_fields[info.field_name].default
        return v


class ContactRead(BaseModel):
    """Minimal contact card returned by ``/contact``."""

    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(..., alias="ID")
    name: str = Field(..., alias="Name")
    email: str = Field("", alias="Email")
    phone: str = Field("", alias="Phone")


def to_record(document: AlumniDocument) -> AlumniRecord:
    """Map an external document onto the internal record shape."""
    return AlumniRecord(**document.model_dump(by_alias=False))


def to_document(record: AlumniRecord) -> AlumniDocument:
    """Map an internal record onto the external document shape."""
    return AlumniDocument(**record.model_dump())


def format_alumni(record: AlumniRecord) -> Dict[str, Any]:
    """Return the Title-case dictionary for a record, in wire order."""
    return to_document(record).model_dump(by_alias=True)


def parse_alumni(data: Dict[str, Any]) -> AlumniRecord:
    """Validate one external JSON object and return the internal record.

    Raises ``pydantic.ValidationError`` when a field has the wrong type.
    """
    return to_record(AlumniDocument.model_validate(data))


def format_contact(record: AlumniRecord) -> Dict[str, Any]:
    contact = ContactRead(id=record.id, name=record.name, email=record.email, phone=record.phone)
    return contact.model_dump(by_alias=True)

"""
gTLD registry models.

Mirrors the subset of the ICANN gTLD JSON registry (version 2) used to render
the new gTLD section of the public suffix list.
"""

from typing import Any, List

from pydantic import AliasChoices, BaseModel, Field, field_validator


class GTLDEntry(BaseModel):
    """
    One gTLD allocation from the ICANN registry.

    String fields are kept verbatim until normalized(); JSON nulls are read as
    empty strings so that every field is always a plain str.
    """

    a_label: str = Field(
        alias="gTLD",
        description="ASCII gTLD name, punycode for internationalized gTLDs",
    )
    u_label: str = Field(
        default="",
        alias="uLabel",
        description="Unicode gTLD name, empty for ASCII gTLDs like 'pizza'",
    )
    registry_operator: str = Field(default="", alias="registryOperator")
    date_of_contract_signature: str = Field(
        default="",
        alias="dateOfContractSignature",
        description="Opaque date text, never parsed",
    )
    date_of_delegation: str = Field(default="", alias="dateOfDelegation")
    contract_terminated: bool = Field(default=False, alias="contractTerminated")
    removal_date: str = Field(
        default="",
        alias="removalDate",
        description="Date the delegation was removed from the root zone",
    )

    model_config = {
        "frozen": True,
        "populate_by_name": True,
    }

    @field_validator(
        "a_label",
        "u_label",
        "registry_operator",
        "date_of_contract_signature",
        "date_of_delegation",
        "removal_date",
        mode="before",
    )
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("contract_terminated", mode="before")
    @classmethod
    def _null_as_false(cls, value: Any) -> Any:
        return False if value is None else value

    def normalized(self) -> "GTLDEntry":
        """
        Return a copy with surrounding whitespace trimmed.

        When the entry has no explicit Unicode label the ASCII label is used in
        its place.
        """
        a_label = self.a_label.strip()
        u_label = self.u_label.strip() or a_label
        return self.model_copy(
            update={
                "a_label": a_label,
                "u_label": u_label,
                "registry_operator": self.registry_operator.strip(),
                "date_of_contract_signature": self.date_of_contract_signature.strip(),
            }
        )


class GTLDRegistry(BaseModel):
    """Top-level object of the ICANN gTLD JSON registry."""

    gtlds: List[GTLDEntry] = Field(
        default_factory=list,
        validation_alias=AliasChoices("gTLDs", "GTLDs"),
    )

    @field_validator("gtlds", mode="before")
    @classmethod
    def _null_as_empty_list(cls, value: Any) -> Any:
        return [] if value is None else value

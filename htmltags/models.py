"""Pydantic models for tag definition documents."""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictBool, field_validator

from .tag_array import HtmlTagArray
from .tag_object import HtmlTagObject, create_html_tag_object


class TagDefinition(BaseModel):
    """One tag as written in a YAML or JSON document."""

    tag_name: str = Field(..., alias="tagName", description="Element name, e.g. 'script'.")
    attributes: Dict[str, Union[StrictBool, str]] = Field(
        default_factory=dict,
        description=(
            "Attribute values. true renders a boolean attribute, false "
            "suppresses the attribute, strings are emitted verbatim."
        ),
    )
    inner_html: Optional[str] = Field(
        None, alias="innerHTML", description="Raw inner markup; ignored for void tags."
    )
    void_tag: Optional[bool] = Field(
        None,
        alias="voidTag",
        description="Force the void flag instead of looking the tag name up.",
    )

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("attributes", mode="before")
    @classmethod
    def _stringify_numbers(cls, value: Any) -> Any:
        # YAML turns `width: 100` into an int.
        if not isinstance(value, dict):
            return value
        return {
            key: str(item) if isinstance(item, (int, float)) and not isinstance(item, bool) else item
            for key, item in value.items()
        }

    def to_tag_object(self) -> HtmlTagObject:
        tag = create_html_tag_object(self.tag_name, dict(self.attributes), self.inner_html)
        if self.void_tag is not None:
            tag.void_tag = self.void_tag
        return tag


class TagDocument(BaseModel):
    """Head and body tags plus the output mode they are rendered with."""

    xhtml: bool = Field(False, description="Render XHTML compliant markup.")
    head: List[TagDefinition] = Field(
        default_factory=list, description="Tags meant for the document head."
    )
    body: List[TagDefinition] = Field(
        default_factory=list, description="Tags meant for the document body."
    )

    def head_tags(self) -> HtmlTagArray:
        return HtmlTagArray(definition.to_tag_object() for definition in self.head)

    def body_tags(self) -> HtmlTagArray:
        return HtmlTagArray(definition.to_tag_object() for definition in self.body)

    def all_tags(self) -> HtmlTagArray:
        return self.head_tags() + self.body_tags()

"""
JSON representation of scripts.

A script document is a JSON array; every element is an object with exactly
one of the keys `bool`, `int`, `float`, `str` or `op`:

    [{"int": 1}, {"int": 2}, {"op": "Add"}, {"str": "Hello"}]

Operator names are resolved against an Enum passed in the validation
context under "operators".
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional, Type, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    RootModel,
    StrictBool,
    StrictFloat,
    StrictInt,
    StrictStr,
    ValidationInfo,
    field_validator,
    model_validator,
)

from scriptful.core.item import Item, Script
from scriptful.core.value import I128_MAX, I128_MIN, Boolean, Float, Integer, String, Value


class ItemModel(BaseModel):
    """One script element."""
    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    bool_: Optional[StrictBool] = Field(None, alias="bool")
    int_: Optional[StrictInt] = Field(None, alias="int")
    float_: Optional[Union[StrictInt, StrictFloat]] = Field(None, alias="float")
    str_: Optional[StrictStr] = Field(None, alias="str")
    op: Optional[Any] = None

    @field_validator("int_")
    @classmethod
    def check_i128(cls, v: Optional[int]) -> Optional[int]:
        if v is not None and not I128_MIN <= v <= I128_MAX:
            raise ValueError(f"integer {v} does not fit in 128 bits")
        return v

    @field_validator("op", mode="before")
    @classmethod
    def resolve_operator(cls, v: Any, info: ValidationInfo) -> Any:
        operators: Optional[Type[Enum]] = (info.context or {}).get("operators")
        if operators is None:
            raise ValueError("no operator table to resolve operators with")
        if isinstance(v, operators):
            return v
        if not isinstance(v, str):
            raise ValueError(f"operator must be a name, got {v!r}")
        try:
            return operators[v]
        except KeyError:
            raise ValueError(f"unknown operator {v!r} for {operators.__name__}") from None

    @model_validator(mode="after")
    def check_single_key(self) -> "ItemModel":
        present = [name for name in self.model_fields_set if getattr(self, name) is not None]
        if len(present) != 1:
            raise ValueError("each script element needs exactly one of bool, int, float, str, op")
        return self

    def to_item(self) -> Item:
        if self.op is not None:
            return Item.operator(self.op)
        if self.bool_ is not None:
            return Item.value(Boolean(self.bool_))
        if self.int_ is not None:
            return Item.value(Integer(self.int_))
        if self.float_ is not None:
            return Item.value(Float(self.float_))
        return Item.value(String(self.str_))


class ScriptModel(RootModel[List[ItemModel]]):
    """A whole script document."""

    def to_script(self) -> Script:
        return [element.to_item() for element in self.root]


def script_from_json(data: Any, operators: Type[Enum]) -> Script:
    """
    Validate a parsed JSON document (or a JSON string) into a Script.

    Raises:
        pydantic.ValidationError: If the document is not a valid script
    """
    context = {"operators": operators}
    if isinstance(data, (str, bytes)):
        model = ScriptModel.model_validate_json(data, context=context)
    else:
        model = ScriptModel.model_validate(data, context=context)
    return model.to_script()


def item_to_json(item: Item) -> Dict[str, Any]:
    if item.is_operator:
        op = item.payload
        return {"op": op.name if isinstance(op, Enum) else op}
    value = item.payload
    if not isinstance(value, Value):
        raise TypeError(f"Cannot represent {value!r} as JSON")
    return {value.kind.value: value.value}


def script_to_json(script: Script) -> List[Dict[str, Any]]:
    return [item_to_json(item) for item in script]

from schemer.types.values import (
    Value,
    Atom,
    List,
    DottedList,
    Number,
    String,
    Bool,
    Character,
    Float,
    Ratio,
    Complex,
    Vector,
    TRUE,
    FALSE,
)

__all__ = [
    "Value",
    "Atom",
    "List",
    "DottedList",
    "Number",
    "String",
    "Bool",
    "Character",
    "Float",
    "Ratio",
    "Complex",
    "Vector",
    "TRUE",
    "FALSE",
]

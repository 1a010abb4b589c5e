from dataclasses import dataclass
from typing import Any, MutableMapping, Sequence, TypeAlias

Props: TypeAlias = MutableMapping[str, Any]

CHILDREN = "children"
CLASS_NAME = "className"


class _Missing:
    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


@dataclass(slots=True, frozen=True)
class Element:
    type: Any
    props: Props


Primitive: TypeAlias = str | int | float
Child: TypeAlias = "Element | Primitive | bool | None | Sequence[Child]"


def el(
    type: Any,
    props: Props | None = None,
    *children: Child,
) -> Element:
    new_props: Props = {} if props is None else dict(props)
    if len(children) == 1:
        new_props[CHILDREN] = children[0]
    elif 1 < len(children):
        new_props[CHILDREN] = list(children)
    return Element(type=type, props=new_props)

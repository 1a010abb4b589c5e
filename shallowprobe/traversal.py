from enum import Enum, auto
from collections.abc import Mapping
from typing import Any, Callable, Iterator, TypeAlias

from shallowprobe.vdom import CHILDREN, CLASS_NAME, MISSING, Child, Element, Props

Visit: TypeAlias = Callable[[Child], None]
Predicate: TypeAlias = Callable[[Child], Any]

NODE_TYPE = "type"
NODE_PROPS = "props"


class ChildKind(Enum):
    SKIP = auto()
    LEAF = auto()
    NODE = auto()
    SEQUENCE = auto()


def is_element(value: Any) -> bool:
    match value:
        case Element():
            return True
        case str() | int() | float() | bool() | None:
            return False
        case Mapping():
            return NODE_TYPE in value and NODE_PROPS in value
        case _:
            return hasattr(value, NODE_TYPE) and hasattr(value, NODE_PROPS)


def classify_child(value: Any) -> ChildKind:
    match value:
        case None | bool():
            return ChildKind.SKIP
        case str() | int() | float():
            return ChildKind.LEAF
        case _ if is_element(value):
            return ChildKind.NODE
        case list() | tuple():
            return ChildKind.SEQUENCE
        case _:
            raise TypeError(f"unexpected child: {value!r}")


def props_of_node(node: Any) -> Props:
    if isinstance(node, Mapping):
        return node[NODE_PROPS]
    return node.props


def type_of_node(node: Any) -> Any:
    if isinstance(node, Mapping):
        return node[NODE_TYPE]
    return node.type


def _flatten(value: Any) -> Iterator[Child]:
    match classify_child(value):
        case ChildKind.SKIP:
            return
        case ChildKind.SEQUENCE:
            for item in value:
                yield from _flatten(item)
        case _:
            yield value


def children_of_node(node: Child) -> list[Child]:
    if not is_element(node):
        return []
    return list(_flatten(props_of_node(node).get(CHILDREN)))


def tree_for_each(root: Child, visit: Visit) -> None:
    visit(root)
    for child in children_of_node(root):
        tree_for_each(child, visit)


def tree_filter(root: Child, predicate: Predicate) -> list[Child]:
    results: list[Child] = []

    def collect(node: Child) -> None:
        if predicate(node):
            results.append(node)

    tree_for_each(root, collect)
    return results


def path_to_node(node: Child, root: Child) -> list[Child] | None:
    if root is node:
        return []
    if not is_element(root):
        return None
    for child in children_of_node(root):
        path = path_to_node(node, child)
        if path is not None:
            return [root, *path]
    return None


def parents_of_node(node: Child, root: Child) -> list[Child]:
    path = path_to_node(node, root)
    if path is None:
        return []
    return path[::-1]


def get_text_from_node(node: Child) -> str:
    match classify_child(node):
        case ChildKind.SKIP:
            return ""
        case ChildKind.LEAF:
            return str(node)
        case ChildKind.NODE:
            return "".join(get_text_from_node(c) for c in children_of_node(node))
        case ChildKind.SEQUENCE:
            return "".join(get_text_from_node(c) for c in node)
    raise AssertionError(f"unexpected: {node}")


def has_class_name(node: Child, class_name: str) -> bool:
    if not is_element(node):
        return False
    class_names = props_of_node(node).get(CLASS_NAME)
    if class_names is None:
        return False
    return class_name in class_names.split()


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _strict_equal(a: Any, b: Any) -> bool:
    # ints and floats are one numeric kind; bools and strings never cross over
    if _is_number(a) and _is_number(b):
        return a == b
    return type(a) is type(b) and a == b


def node_has_property(node: Child, name: str, expected_value: Any = MISSING) -> bool:
    if not is_element(node):
        return False
    value = props_of_node(node).get(name, MISSING)
    if value is MISSING:
        return False
    if expected_value is MISSING:
        return True
    return _strict_equal(value, expected_value)


def node_has_type(node: Child, type_: Any) -> bool:
    if not is_element(node):
        return False
    node_type = type_of_node(node)
    if node_type == type_:
        return True
    if isinstance(type_, str) and not isinstance(node_type, str):
        names = (
            getattr(node_type, "displayName", None),
            getattr(node_type, "__name__", None),
        )
        return type_ in names
    return False

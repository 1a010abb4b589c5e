from importlib.metadata import PackageNotFoundError, version

try:
    __version__: str = version(__name__)
except PackageNotFoundError:
    __version__: str = "unknown"

from .selector import (
    SelectorError,
    SelectorType,
    all_of,
    build_predicate,
    coerce_prop_value,
    find,
    parse_attribute,
    selector_type,
    split_selector,
)
from .traversal import (
    ChildKind,
    children_of_node,
    classify_child,
    get_text_from_node,
    has_class_name,
    is_element,
    node_has_property,
    node_has_type,
    parents_of_node,
    path_to_node,
    props_of_node,
    tree_filter,
    tree_for_each,
)
from .vdom import MISSING, Element, el

__all__ = [
    "ChildKind",
    "Element",
    "MISSING",
    "SelectorError",
    "SelectorType",
    "all_of",
    "build_predicate",
    "children_of_node",
    "classify_child",
    "coerce_prop_value",
    "el",
    "find",
    "get_text_from_node",
    "has_class_name",
    "is_element",
    "node_has_property",
    "node_has_type",
    "parents_of_node",
    "path_to_node",
    "props_of_node",
    "parse_attribute",
    "selector_type",
    "split_selector",
    "tree_filter",
    "tree_for_each",
]

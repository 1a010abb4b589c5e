import logging
import re
from enum import Enum, auto
from typing import Any, Sequence

from shallowprobe.traversal import (
    Predicate,
    has_class_name,
    node_has_property,
    node_has_type,
    tree_filter,
)
from shallowprobe.vdom import MISSING, Child

logger = logging.getLogger(__name__)


class SelectorError(ValueError):
    ...


class SelectorType(Enum):
    CLASS = auto()
    PROP = auto()
    TYPE = auto()


def _is_identifier_char(ch: str) -> bool:
    return ch.isalnum() or ch == "_"


def _is_class_char(ch: str) -> bool:
    return ch.isalnum() or ch in "-_"


class SelectorScanner:
    __slots__ = ("length", "pos", "selector")

    selector: str
    pos: int
    length: int

    def __init__(self, selector: str) -> None:
        self.selector = selector
        self.pos = 0
        self.length = len(selector)

    def _read_identifier(self) -> str:
        start = self.pos
        while self.pos < self.length and _is_identifier_char(self.selector[self.pos]):
            self.pos += 1
        return self.selector[start : self.pos]

    def _read_class(self) -> str:
        start = self.pos
        # Skip the dot
        self.pos += 1
        while self.pos < self.length and _is_class_char(self.selector[self.pos]):
            self.pos += 1
        if self.pos == start + 1:
            raise SelectorError(f"Expected class name after . at position {start}")
        return self.selector[start : self.pos]

    def _read_attribute(self) -> str:
        start = self.pos
        depth = 0
        quote: str | None = None

        while self.pos < self.length:
            ch = self.selector[self.pos]
            self.pos += 1
            if quote is not None:
                if ch == "\\":
                    self.pos += 1
                elif ch == quote:
                    quote = None
            elif ch in "\"'":
                quote = ch
            elif ch == "[":
                depth += 1
            elif ch == "]":
                depth -= 1
                if depth == 0:
                    return self.selector[start : self.pos]

        raise SelectorError(f"Unterminated attribute selector at position {start}")

    def tokenize(self) -> list[str]:
        tokens: list[str] = []

        if self.length and (self.selector[0].isalpha() or self.selector[0] == "_"):
            tokens.append(self._read_identifier())

        while self.pos < self.length:
            ch = self.selector[self.pos]
            if ch == ".":
                tokens.append(self._read_class())
            elif ch == "[":
                tokens.append(self._read_attribute())
            else:
                raise SelectorError(f"Unexpected character {ch!r} at position {self.pos}")

        if not tokens:
            raise SelectorError("Empty selector")
        return tokens


def split_selector(selector: str) -> list[str]:
    """Split ``selector`` into its identifier, class and attribute tokens.

    Returns an empty list when any part of the selector is not understood.
    """
    try:
        return SelectorScanner(selector).tokenize()
    except SelectorError as e:
        logger.debug("rejected selector %r: %s", selector, e)
        return []


def selector_type(token: str) -> SelectorType:
    match token[:1]:
        case ".":
            return SelectorType.CLASS
        case "[":
            return SelectorType.PROP
        case _:
            return SelectorType.TYPE


_ATTRIBUTE_RE = re.compile(r"^\[\s*([^\s=\[\]]+)\s*(?:=\s*(.*?)\s*)?\]$", re.DOTALL)
_INT_RE = re.compile(r"^[+-]?\d+$")
_FLOAT_RE = re.compile(r"^[+-]?(\d+\.\d*|\.\d+|\d+)([eE][+-]?\d+)?$")
_ESCAPE_RE = re.compile(r"\\(.)", re.DOTALL)


def coerce_prop_value(raw: str) -> Any:
    if 2 <= len(raw) and raw[0] == raw[-1] and raw[0] in "\"'":
        return _ESCAPE_RE.sub(r"\1", raw[1:-1])
    match raw:
        case "true":
            return True
        case "false":
            return False
    if _INT_RE.match(raw):
        return int(raw)
    if _FLOAT_RE.match(raw):
        return float(raw)
    raise SelectorError(f"Unquoted value in attribute selector: {raw!r}")


def parse_attribute(token: str) -> tuple[str, Any]:
    m = _ATTRIBUTE_RE.match(token)
    if m is None:
        raise SelectorError(f"Invalid attribute selector: {token!r}")
    name, raw = m.groups()
    if raw is None:
        return (name, MISSING)
    return (name, coerce_prop_value(raw))


def all_of(predicates: Sequence[Predicate]) -> Predicate:
    predicates = tuple(predicates)
    return lambda node: all(p(node) for p in predicates)


def _token_predicate(token: str) -> Predicate:
    match selector_type(token):
        case SelectorType.CLASS:
            class_name = token[1:]
            return lambda node: has_class_name(node, class_name)
        case SelectorType.PROP:
            (name, value) = parse_attribute(token)
            return lambda node: node_has_property(node, name, value)
        case SelectorType.TYPE:
            return lambda node: node_has_type(node, token)
    raise AssertionError(f"unexpected: {token}")


def build_predicate(selector: Any) -> Predicate:
    if not isinstance(selector, str):
        return lambda node: node_has_type(node, selector)

    tokens = split_selector(selector)
    if not tokens:
        raise SelectorError(f"Invalid selector: {selector!r}")
    logger.debug("selector %r split into %r", selector, tokens)

    predicates = [_token_predicate(t) for t in tokens]
    if len(predicates) == 1:
        return predicates[0]
    return all_of(predicates)


def find(root: Child, selector: Any) -> list[Child]:
    return tree_filter(root, build_predicate(selector))

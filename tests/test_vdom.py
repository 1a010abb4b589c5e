from shallowprobe.vdom import CHILDREN, Element, el


def test_construct_element() -> None:
    node = el("div", {"width": "100px"}, "hello", el("span", None, "world"))

    assert node.type == "div"
    assert node.props["width"] == "100px"
    children = node.props[CHILDREN]
    assert len(children) == 2
    assert isinstance(children[0], str)
    assert children[0] == "hello"
    assert isinstance(children[1], Element)
    assert children[1].type == "span"
    assert children[1].props == {CHILDREN: "world"}


def test_single_child_is_not_wrapped() -> None:
    child = el("span")
    node = el("div", None, child)

    assert node.props[CHILDREN] is child


def test_no_children() -> None:
    assert el("br").props == {}
    assert el("ul", {CHILDREN: [el("li")]}).props[CHILDREN] == [el("li")]


def test_props_are_copied() -> None:
    props = {"title": "foo"}
    node = el("div", props, "text")

    assert props == {"title": "foo"}
    assert node.props == {"title": "foo", CHILDREN: "text"}

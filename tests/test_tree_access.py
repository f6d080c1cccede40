from dataclasses import dataclass, field

import pytest

from astokens import TreePath, UnknownNodeType, UnresolvableReference
from astokens.matcher import RefResolver
from astokens.nodes import get_path, has_field, node_cst_tokens, node_range, node_type
from tests._shared_cases import call, id_token, ident, reference


@dataclass
class Name:
    name: str
    type: str = "Identifier"


@dataclass
class Call:
    callee: Name
    arguments: list[Name] = field(default_factory=list)
    type: str = "CallExpression"


def test_tree_path_chain_terminates_at_root() -> None:
    root = TreePath(call(ident("f"), ident("a")))
    child = root.child(root.node["arguments"][0], ("arguments", 0))
    grandchild = child.child({"type": "Leaf"})

    assert root.parent is None
    assert grandchild.root is root
    assert [path.node for path in grandchild.ancestors()] == [child.node, root.node]
    assert (root.depth, child.depth, grandchild.depth) == (0, 1, 2)
    assert child.key == ("arguments", 0)


def test_node_accessors_work_for_mappings_and_objects() -> None:
    obj = Call(Name("f"), [Name("a")])
    mapping = call(ident("f"), ident("a"))

    assert node_type(obj) == "CallExpression"
    assert node_type(mapping) == "CallExpression"
    assert get_path(obj, ("arguments", 0)).name == "a"
    assert get_path(mapping, ("arguments", 0))["name"] == "a"
    assert has_field(obj, "callee") and has_field(mapping, "callee")
    assert not has_field(obj, "body") and not has_field(mapping, "body")


def test_node_type_is_required() -> None:
    with pytest.raises(UnknownNodeType):
        node_type({"name": "a"})


def test_node_tokens_and_range() -> None:
    tokens = [id_token("a")]
    assert node_cst_tokens({"cstTokens": tokens}) == tokens
    assert node_cst_tokens({"cst_tokens": tokens}) == tokens
    assert node_cst_tokens({}) is None
    assert node_range({"range": [1, 4]}) == (1, 4)
    assert node_range({"start": 1, "end": 4}) == (1, 4)
    assert node_range({}) is None


def test_resolver_counts_list_occurrences() -> None:
    resolver = RefResolver(call(ident("f"), ident("a"), ident("b")))

    assert resolver.resolve(reference("callee")) == ("callee",)
    assert resolver.resolve(reference("arguments")) == ("arguments", 0)
    assert resolver.resolve(reference("arguments")) == ("arguments", 1)
    with pytest.raises(UnresolvableReference):
        resolver.resolve(reference("arguments"))


def test_resolver_fork_does_not_touch_original() -> None:
    resolver = RefResolver(call(ident("f"), ident("a"), ident("b")))
    fork = resolver.fork()

    assert fork.resolve(reference("arguments")) == ("arguments", 0)
    assert fork.resolve(reference("arguments")) == ("arguments", 1)
    assert resolver.resolve(reference("arguments")) == ("arguments", 0)


def test_resolver_is_deterministic() -> None:
    node = call(ident("f"), ident("a"), ident("b"))
    names = ["callee", "arguments", "arguments"]
    resolver_a, resolver_b = RefResolver(node), RefResolver(node)

    assert [resolver_a.resolve(reference(n)) for n in names] == [resolver_b.resolve(reference(n)) for n in names]


def test_resolver_supports_object_nodes() -> None:
    resolver = RefResolver(Call(Name("f"), [Name("a")]))
    assert resolver.resolve(reference("arguments")) == ("arguments", 0)
    with pytest.raises(UnresolvableReference):
        resolver.resolve(reference("body"))

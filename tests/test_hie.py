"""Tests for the input tree model."""

from __future__ import annotations

import pytest

from hiegraph.hie import ContextInfo, IdentifierDetails, ModuleName, NodeAnnotation
from tests.builders import key, node, use


class TestNodeAnnotation:
    @pytest.mark.parametrize(
        ("category", "subcategory", "expected"),
        [
            ("Module", "Module", NodeAnnotation.MODULE),
            ("ImportDecl", "ImportDecl", NodeAnnotation.IMPORT_DECL),
            ("DataDecl", "TyClDecl", NodeAnnotation.UNRECOGNIZED),
            ("Module", "ImportDecl", NodeAnnotation.UNRECOGNIZED),
        ],
    )
    def test_classify(self, category: str, subcategory: str, expected: NodeAnnotation) -> None:
        assert NodeAnnotation.classify(category, subcategory) is expected


class TestHieNode:
    def test_map_types_rewrites_every_payload(self) -> None:
        # Given
        tree = node(
            node(types=[2], ids=[use(1, type=3)]),
            types=[1],
            ids=[(ModuleName("M"), IdentifierDetails(context=frozenset({ContextInfo.IMPORT})))],
        )

        # When
        mapped = tree.map_types(lambda i: (key(i * 10),))

        # Then
        assert mapped.types == ((key(10),),)
        assert mapped.identifiers[0][1].type is None
        child = mapped.children[0]
        assert child.types == ((key(20),),)
        assert child.identifiers[0][1].type == (key(30),)
        assert child.identifiers[0][1].context == frozenset({ContextInfo.USE})

    def test_map_types_keeps_structure(self) -> None:
        tree = node(node(), node(node()))
        mapped = tree.map_types(str)

        assert len(mapped.children) == 2
        assert len(mapped.children[1].children) == 1


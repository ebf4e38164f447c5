"""Backtracking query combinators over tree-shaped contexts.

A parser is any callable taking the current context and returning a value on
success or ``None`` on failure. Failure carries no message or position and
has no side effects, so alternatives can be tried freely. Successful parsers
never return ``None``; ``p_check`` succeeds with ``True``.

Child selection is delegated to a ``select`` function so the same vocabulary
works for node children, identifier tables, or any other list reachable from
the context::

    def children(node):
        return node.children

    p_one(children, p_check(lambda n: n.is_leaf))
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TypeVar

N = TypeVar("N")
M = TypeVar("M")
A = TypeVar("A")
B = TypeVar("B")

TreeParser = Callable[[N], A | None]
Selector = Callable[[N], Sequence[M]]


def run_parser(parser: TreeParser[N, A], ctx: N) -> A | None:
    return parser(ctx)


def p_local(ctx: M, sub: TreeParser[M, A]) -> TreeParser[N, A]:
    """Run ``sub`` against ``ctx`` regardless of the current context."""

    def parse(_current: N) -> A | None:
        return sub(ctx)

    return parse


def p_all(select: Selector[N, M], sub: TreeParser[M, A]) -> TreeParser[N, list[A]]:
    """Run ``sub`` on every selected child; fails if any of them fails."""

    def parse(ctx: N) -> list[A] | None:
        results: list[A] = []
        for child in select(ctx):
            result = sub(child)
            if result is None:
                return None
            results.append(result)
        return results

    return parse


def p_many(select: Selector[N, M], sub: TreeParser[M, A]) -> TreeParser[N, list[A]]:
    """Run ``sub`` on every selected child, keeping the successes. Never fails."""

    def parse(ctx: N) -> list[A]:
        return [result for result in map(sub, select(ctx)) if result is not None]

    return parse


def p_some(select: Selector[N, M], sub: TreeParser[M, A]) -> TreeParser[N, list[A]]:
    """Like ``p_many`` but fails when nothing matched."""
    many = p_many(select, sub)

    def parse(ctx: N) -> list[A] | None:
        return many(ctx) or None

    return parse


def p_any(select: Selector[N, M], sub: TreeParser[M, A]) -> TreeParser[N, A]:
    """First selected child on which ``sub`` succeeds, in selection order."""

    def parse(ctx: N) -> A | None:
        for child in select(ctx):
            result = sub(child)
            if result is not None:
                return result
        return None

    return parse


def p_one(select: Selector[N, M], sub: TreeParser[M, A]) -> TreeParser[N, A]:
    """Succeeds only if ``sub`` matches exactly one selected child."""
    many = p_many(select, sub)

    def parse(ctx: N) -> A | None:
        results = many(ctx)
        if len(results) != 1:
            return None
        return results[0]

    return parse


def p_check(predicate: Callable[[N], bool]) -> TreeParser[N, bool]:
    def parse(ctx: N) -> bool | None:
        return True if predicate(ctx) else None

    return parse


def p_first(*alternatives: TreeParser[N, A]) -> TreeParser[N, A]:
    """Ordered choice: the first alternative that succeeds wins."""

    def parse(ctx: N) -> A | None:
        for alternative in alternatives:
            result = alternative(ctx)
            if result is not None:
                return result
        return None

    return parse


def p_map(parser: TreeParser[N, A], f: Callable[[A], B]) -> TreeParser[N, B]:
    def parse(ctx: N) -> B | None:
        result = parser(ctx)
        return None if result is None else f(result)

    return parse


def p_bind(parser: TreeParser[N, A], f: Callable[[A], TreeParser[N, B]]) -> TreeParser[N, B]:
    """Sequence: feed the result of ``parser`` into the parser ``f`` builds."""

    def parse(ctx: N) -> B | None:
        result = parser(ctx)
        return None if result is None else f(result)(ctx)

    return parse


def p_optional(parser: TreeParser[N, A], default: A) -> TreeParser[N, A]:
    """Absorb failure of ``parser`` into ``default``."""

    def parse(ctx: N) -> A:
        result = parser(ctx)
        return default if result is None else result

    return parse

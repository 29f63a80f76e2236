"""Facade functions: each call starts a fresh :class:`SelectorBuilder`.

Usage::

    from cssbuilder.selector import facade as css

    css.element("a").attr('href$=".png"').pseudo_class("focus").stringify()
    # 'a[href$=".png"]:focus'
"""

from __future__ import annotations

from cssbuilder.selector.builder import SelectorBuilder

__all__ = [
    "element",
    "id",
    "class_",
    "attr",
    "pseudo_class",
    "pseudo_element",
    "combine",
    "stringify",
]


def element(value: str) -> SelectorBuilder:
    return SelectorBuilder().element(value)


def id(value: str) -> SelectorBuilder:  # noqa: A001
    return SelectorBuilder().id(value)


def class_(value: str) -> SelectorBuilder:
    return SelectorBuilder().class_(value)


def attr(value: str) -> SelectorBuilder:
    return SelectorBuilder().attr(value)


def pseudo_class(value: str) -> SelectorBuilder:
    return SelectorBuilder().pseudo_class(value)


def pseudo_element(value: str) -> SelectorBuilder:
    return SelectorBuilder().pseudo_element(value)


def combine(
    left: SelectorBuilder, combinator: str, right: SelectorBuilder
) -> SelectorBuilder:
    return SelectorBuilder().combine(left, combinator, right)


def stringify() -> str:
    """Finalize an empty builder. Always returns ``""``."""
    return SelectorBuilder().stringify()

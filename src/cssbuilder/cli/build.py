"""CLI command: cssbuilder build -- assemble a selector from part tokens."""

from __future__ import annotations

import sys

import click

from cssbuilder.selector import SelectorBuilder, SelectorError, facade

# Token kind -> builder/facade method name.
_PART_METHODS: dict[str, str] = {
    "element": "element",
    "id": "id",
    "class": "class_",
    "attr": "attr",
    "pseudo-class": "pseudo_class",
    "pseudo-element": "pseudo_element",
}

_COMBINATORS: dict[str, str] = {
    "+": "+",
    "~": "~",
    ">": ">",
    " ": " ",
    "descendant": " ",
}


def _split_tokens(
    tokens: tuple[str, ...],
) -> tuple[list[list[tuple[str, str]]], list[str]]:
    """Group tokens into compound part lists separated by combinators."""
    compounds: list[list[tuple[str, str]]] = [[]]
    combinators: list[str] = []
    for token in tokens:
        if token in _COMBINATORS:
            if not compounds[-1]:
                raise click.BadParameter(
                    f"combinator {token!r} must follow a selector part",
                    param_hint="TOKENS",
                )
            combinators.append(_COMBINATORS[token])
            compounds.append([])
            continue
        kind, sep, value = token.partition(":")
        if not sep or kind not in _PART_METHODS:
            raise click.BadParameter(
                f"expected KIND:VALUE with KIND in {', '.join(_PART_METHODS)}, got {token!r}",
                param_hint="TOKENS",
            )
        compounds[-1].append((kind, value))
    if not compounds[-1]:
        raise click.BadParameter(
            "selector cannot end with a combinator", param_hint="TOKENS"
        )
    return compounds, combinators


def _build_compound(parts: list[tuple[str, str]]) -> SelectorBuilder:
    kind, value = parts[0]
    builder = getattr(facade, _PART_METHODS[kind])(value)
    for kind, value in parts[1:]:
        builder = getattr(builder, _PART_METHODS[kind])(value)
    return builder


def build_selector(tokens: tuple[str, ...]) -> str:
    """Build a selector string from CLI tokens.

    Compounds separated by combinators are nested to the right, so
    ``a + b ~ c`` becomes ``combine(a, "+", combine(b, "~", c))``.
    """
    compounds, combinators = _split_tokens(tokens)
    builders = [_build_compound(parts) for parts in compounds]
    result = builders[-1]
    for left, combinator in zip(reversed(builders[:-1]), reversed(combinators)):
        result = facade.combine(left, combinator, result)
    return result.stringify()


@click.command()
@click.argument("tokens", nargs=-1, required=True)
def build(tokens: tuple[str, ...]) -> None:
    """Build a CSS selector from ordered TOKENS.

    Each token is either a part written as KIND:VALUE (element, id, class,
    attr, pseudo-class, pseudo-element) or a combinator: +, ~, > or
    'descendant'.

    Example: cssbuilder build element:a 'attr:href$=".png"' pseudo-class:focus
    """
    try:
        selector = build_selector(tokens)
    except SelectorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    click.echo(selector)

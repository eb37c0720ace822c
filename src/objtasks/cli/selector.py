"""CLI command: objtasks selector -- build a CSS selector from fragments."""

from __future__ import annotations

import sys

import click

from objtasks.selector import Selector, SelectorError, css_selector_builder

FRAGMENTS = {
    "element": Selector.element,
    "id": Selector.id,
    "class": Selector.class_,
    "attr": Selector.attr,
    "pseudo-class": Selector.pseudo_class,
    "pseudo-element": Selector.pseudo_element,
}


@click.command()
@click.argument("parts", nargs=-1, required=True)
def selector(parts: tuple[str, ...]) -> None:
    """Build a selector from PARTS and print it.

    Each part is either KIND=VALUE, where KIND is one of element, id, class,
    attr, pseudo-class or pseudo-element, or a bare combinator such as
    '>', '+' or '~' that starts the next compound selector:

        objtasks selector element=div id=main '>' element=p class=lead
    """
    compounds = [Selector()]
    combinators: list[str] = []

    try:
        for part in parts:
            kind, sep, value = part.partition("=")
            if not sep:
                combinators.append(part)
                compounds.append(Selector())
                continue
            if kind not in FRAGMENTS:
                raise click.BadParameter(
                    f"unknown fragment kind {kind!r}; expected one of: "
                    + ", ".join(FRAGMENTS),
                    param_hint="PARTS",
                )
            compounds[-1] = FRAGMENTS[kind](compounds[-1], value)
    except SelectorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    result = compounds[0]
    for combinator, compound in zip(combinators, compounds[1:]):
        result = css_selector_builder.combine(result, combinator, compound)
    click.echo(result.stringify())

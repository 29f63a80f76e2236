"""CLI commands: cssbuilder area / rect -- rectangle helpers."""

from __future__ import annotations

import click

from cssbuilder.codec import encode
from cssbuilder.model import Rectangle


def _number(value: float) -> int | float:
    value = float(value)
    return int(value) if value.is_integer() else value


@click.command()
@click.argument("width", type=float)
@click.argument("height", type=float)
def area(width: float, height: float) -> None:
    """Print the area of a WIDTH x HEIGHT rectangle.

    Put -- before negative values: cssbuilder area -- -5 3
    """
    rectangle = Rectangle(_number(width), _number(height))
    click.echo(_number(rectangle.area))


@click.command()
@click.argument("width", type=float)
@click.argument("height", type=float)
def rect(width: float, height: float) -> None:
    """Print a WIDTH x HEIGHT rectangle as JSON.

    Put -- before negative values: cssbuilder rect -- -5 3
    """
    click.echo(encode(Rectangle(_number(width), _number(height))))

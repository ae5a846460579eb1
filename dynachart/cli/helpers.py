from typing import Any, Callable

import click

UNSET_SOURCES = (
    click.core.ParameterSource.DEFAULT,
    click.core.ParameterSource.DEFAULT_MAP,
)


def borders_option(*args: Any, **kwargs: Any) -> Callable:
    """Geometry option, collected into ctx.params["borders_options"] only when
    the user actually passed it so Borders keeps its own defaults otherwise"""
    return click.option(
        *args, callback=collect_border_value, expose_value=False, **kwargs
    )


def collect_border_value(
    ctx: click.Context, param: click.Parameter, value: Any
) -> None:
    assert param.name is not None
    if ctx.get_parameter_source(param.name) in UNSET_SOURCES:
        return

    ctx.params.setdefault("borders_options", {})[param.name] = value

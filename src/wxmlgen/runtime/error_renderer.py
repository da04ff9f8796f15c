import traceback

from jinja2 import Environment, PackageLoader, select_autoescape

_env = Environment(
    loader=PackageLoader("wxmlgen", "templates"),
    autoescape=select_autoescape(["wxml"]),
)


def render_error_document(name: str, error: BaseException) -> str:
    """Render the replacement document for a template that failed to generate.

    The result is still a ``<template name="...">`` envelope so that a batch
    of compiled templates stays loadable; its body is meant for humans.
    """
    trace = "".join(
        traceback.format_exception(type(error), error, error.__traceback__)
    ).rstrip()
    return _env.get_template("error.wxml").render(
        name=name,
        error=f"{type(error).__name__}: {error}",
        trace=trace,
    )

#!/usr/bin/env python3

import logging
import pathlib

import click
import lazy_object_proxy
import pydantic

from password_checker._cli.commands.check import check
from password_checker._cli.exc import ConfigSyntaxError, ConfigValidationError
from password_checker._conf import Settings
from password_checker.exc import Location
from password_checker.util.model import convert_errors, format_errors

ConfigOption = pathlib.Path | None


def validate_config(ctx: click.Context, fn: ConfigOption) -> Settings:
    payload = {}

    if fn is not None:
        from ruamel import yaml
        from ruamel.yaml.error import MarkedYAMLError, YAMLError

        _loader = yaml.YAML(typ="safe")

        try:
            payload = _loader.load(fn.read_bytes()) or {}
        except YAMLError as ex:
            loc = Location(filename=fn)
            if isinstance(ex, MarkedYAMLError) and (mark := ex.problem_mark):
                loc.update(line=mark.line + 1, col=mark.column + 1)

            raise ConfigSyntaxError(
                str(ex), ctx=ConfigSyntaxError.Context(loc=loc)
            ) from ex

        if not isinstance(payload, dict):
            raise ConfigValidationError(
                message="<root>: Input must be a valid mapping"
            )

        if bad_keys := [k for k in payload if not isinstance(k, str)]:
            raise ConfigValidationError(
                message="<root>: Keys must be strings, got %s"
                % ", ".join(map(repr, bad_keys))
            )

    try:
        res = Settings(**payload)
    except pydantic.ValidationError as ex:
        raise ConfigValidationError(message=format_errors(convert_errors(ex))) from ex

    assert isinstance(res, Settings), "Expected %r, got %r" % (
        Settings.__name__,
        res,
    )
    return res


@click.group()
@click.option("-D", "--debug/--no-debug", default=False, help="Enable debug mode.")
@click.option(
    "-c",
    "--config",
    type=click.Path(
        dir_okay=False,
        exists=True,
        readable=True,
        path_type=pathlib.Path,
    ),
    help="Path to a YAML file describing the password policy.",
)
@click.pass_context
def cli(ctx: click.Context, debug: bool, config: ConfigOption) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
    )
    ctx.obj = lazy_object_proxy.Proxy(lambda: validate_config(ctx=ctx, fn=config))


cli.add_command(check)


def main() -> None:
    cli(auto_envvar_prefix="PASSWORD_CHECKER")


if __name__ == "__main__":
    main()

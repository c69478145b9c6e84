#!/usr/bin/env python3

import json
from pathlib import Path

from password_checker import PasswordPolicy
from password_checker._conf import Settings
from pydantic.json_schema import model_json_schema


def execute(output_dir: str):
    for filename, builder in {
        Path(output_dir) / "password_policy.json": PasswordPolicy,
        Path(output_dir) / "configuration.json": Settings,
    }.items():
        filename.write_text(json.dumps(model_json_schema(builder), indent=2))
        print("generated", filename)


if __name__ == "__main__":
    from argparse import ArgumentParser

    parser = ArgumentParser(
        prog="collect_json_schemas",
        description="Writes JSON schemas for policy and configuration files to a "
        "given folder.",
    )
    parser.add_argument("output_dir")
    args = parser.parse_args()

    execute(output_dir=args.output_dir)

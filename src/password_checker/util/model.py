import pydantic
import pydantic_core

__all__ = ("convert_errors", "format_errors")


CUSTOM_TYPES = {
    "dict_type": "mapping_type",
    "model_type": "mapping_type",
    "model_attributes_type": "mapping_type",
    "extra_forbidden": "extra_field",
    "bool_parsing": "bool_type",
    "int_parsing": "int_type",
}
CUSTOM_MESSAGES = {
    # https://docs.pydantic.dev/latest/errors/validation_errors/
    "extra_field": "Extra fields not allowed",
    "missing": "Field is required",
    "mapping_type": "Input must be a valid mapping",
    "bool_type": "Input must be either true or false",
    "int_type": "Input must be a valid integer",
    "greater_than_equal": "Input must be greater than or equal to {ge}",
    "enum": "Input must be one of the following values: {expected}",
}


def convert_errors(
    ex: pydantic.ValidationError,
    custom_messages: dict[str, str] = CUSTOM_MESSAGES,
    custom_types: dict[str, str] = CUSTOM_TYPES,
) -> list[pydantic_core.ErrorDetails]:
    new_errors: list[pydantic_core.ErrorDetails] = []

    for error in ex.errors(include_url=False):
        ctx = error.get("ctx")

        if custom_type := custom_types.get(error["type"]):
            error["type"] = custom_type

        if custom_message := custom_messages.get(error["type"]):
            error["msg"] = custom_message.format(**ctx) if ctx else custom_message

        if ctx:
            # we don't want to show the context to the user
            del error["ctx"]

        # the rejected value may be a password, never echo it back
        error.pop("input", None)  # type: ignore[misc]

        new_errors.append(error)

    return new_errors


def format_errors(errors: list[pydantic_core.ErrorDetails]) -> str:
    return "\n".join(
        "%s: %s" % (".".join(map(str, error["loc"])) or "<root>", error["msg"])
        for error in errors
    )

import re
from pydantic import model_validator
from typing import Any, ClassVar

from shared.core.schemas import CamelModel

INVISIBLE_CHARS_PATTERN = re.compile(
    r'[\u200e\u200f\u202a-\u202e\u2066-\u2069\ufeff]')


def deep_clean(value: Any, blank_to_none: bool = True):
    """Recursively strip strings and drop invisible chars; blank strings become None unless told otherwise."""

    if isinstance(value, dict):
        return {k: deep_clean(v, blank_to_none) for k, v in value.items()}

    if isinstance(value, list):
        return [deep_clean(v, blank_to_none) for v in value]

    if isinstance(value, str):
        cleaned = INVISIBLE_CHARS_PATTERN.sub("", value).strip()
        if blank_to_none and cleaned == "":
            return None
        return cleaned

    return value


class EmptyStringModel(CamelModel):
    """Base for request payloads: blank text counts as missing."""

    # update payloads keep "" so a sent-but-blank field fails its own validator
    blank_is_missing: ClassVar[bool] = True

    @model_validator(mode="before")
    @classmethod
    def clean_input(cls, values):
        if isinstance(values, dict):
            return deep_clean(values, cls.blank_is_missing)
        return values

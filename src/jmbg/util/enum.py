import typing as t
from enum import StrEnum


class CaseInsensitiveEnum(StrEnum):
    """
    Like StrEnum but allows it to be instantiated with any case-insensitive version of its values. Handy for CLI
    arguments and query parameters where users type `JSON` as often as `json`:

        class OutputFormat(CaseInsensitiveEnum):
            TEXT = enum.auto()
            JSON = enum.auto()

    str(OutputFormat("Json")) # 'json'
    """

    @classmethod
    def _missing_(cls, value: object) -> t.Any | None:
        if not isinstance(value, str):
            return None
        value = value.lower()
        for member in cls:
            if member.lower() == value:
                return member
        return None


class CaseInsensitiveUppercaseEnum(CaseInsensitiveEnum):
    """
    As CaseInsensitiveEnum, but enum.auto() generates values matching the attribute names:

        class Region(CaseInsensitiveUppercaseEnum):
            CROATIA = enum.auto()

    str(Region("croatia")) # 'CROATIA'
    """

    @staticmethod
    def _generate_next_value_(name: str, start: int, count: int, last_values: list[t.Any]) -> t.Any:
        return name

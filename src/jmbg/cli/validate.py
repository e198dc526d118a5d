"Command-line validation of JMBG/OIB numbers"

import enum
import json
import sys

from pydantic_settings import CliImplicitFlag, CliPositionalArg

from jmbg.service.validator import JmbgDetails, validate
from jmbg.util.argparse import PydanticArguments
from jmbg.util.enum import CaseInsensitiveEnum
from jmbg.util.logging import setup_logging
from jmbg.util.sentry import init as setup_sentry


class OutputFormat(CaseInsensitiveEnum):
    TEXT = enum.auto()
    JSON = enum.auto()


def format_text(details: JmbgDetails) -> str:
    birth_date = details.birth_date.isoformat() if details.birth_date else "-"
    return "\t".join(
        (
            details.raw_value,
            "valid" if details.is_valid else "invalid",
            details.region.description,
            details.gender.description,
            birth_date,
        )
    )


def format_json(details: JmbgDetails) -> str:
    return json.dumps({**details.model_dump(mode="json"), "formatted": details.format()})


class ValidateArguments(PydanticArguments):
    """
    Validate JMBG numbers (and optionally OIBs), printing one line per value.
    """

    values: CliPositionalArg[list[str]]
    accept_oib: CliImplicitFlag[bool] = False
    output: OutputFormat = OutputFormat.TEXT

    def cli_cmd(self) -> None:
        formatter = format_json if self.output == OutputFormat.JSON else format_text
        for value in self.values:
            print(formatter(validate(value, self.accept_oib)))


def main() -> int:
    setup_sentry()
    setup_logging()
    return ValidateArguments.run()


if __name__ == "__main__":
    sys.exit(main())

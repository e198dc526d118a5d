import argparse

from pydantic import ValidationError
from pydantic_settings import CliApp, CliSettingsSource

from jmbg.util.config import JmbgSettings


class PydanticArguments(JmbgSettings, cli_parse_args=True, cli_kebab_case=True):
    """
    Command-line arguments declared as a settings model. Fields fall back to their JMBG_ environment variables, and
    the subclass's `cli_cmd` method is run once parsing succeeds.
    """

    @classmethod
    def run(cls) -> int:
        css: CliSettingsSource[argparse.ArgumentParser] = CliSettingsSource(cls)
        try:
            CliApp.run(cls, cli_settings_source=css)
        except ValidationError as e:
            msg = ""
            for err in e.errors():
                msg += f"\nargument {err['loc'][0]}: {err['msg']}"
            css.root_parser.error(msg)
        return 0

import re
import typing as t

import sentry_sdk

from jmbg.util.config import JmbgSettings

# Runs of digits as long as an OIB or JMBG
_IDENTIFIER_RE = re.compile(r"\d{11,13}")
FILTERED = "[Filtered]"


class SentrySettings(JmbgSettings):
    environment: t.Optional[str] = "dev"
    commit_tag: str = "dev"
    sentry_dsn: t.Optional[str] = None


sentry_settings = SentrySettings()


def scrub_identifiers(text: str) -> str:
    """
    Replace anything that looks like a JMBG or OIB with a placeholder.
    """
    return _IDENTIFIER_RE.sub(FILTERED, text)


def _scrub_request(request: dict[str, t.Any]) -> None:
    for key in ("url", "query_string"):
        if isinstance(request.get(key), str):
            request[key] = scrub_identifiers(request[key])


def init(ignore_exceptions: t.Sequence[t.Type[Exception]] = ()) -> None:
    """
    Initialize sentry; should be done as soon as possible in the program.

    Identifiers are personal data, so they are stripped from request URLs,
    transaction names and messages before an event leaves the process.

    :param ignore_exceptions: A list of exception types to ignore to surpress reporting them.
    """
    if not sentry_settings.sentry_dsn:
        return

    def sentry_before_send(event: t.Any, hint: t.Any) -> t.Any:
        if "exc_info" in hint:
            exc_type, exc_value, tb = hint["exc_info"]
            if any(isinstance(exc_value, ex) for ex in ignore_exceptions):
                return None

        if isinstance(event.get("request"), dict):
            _scrub_request(event["request"])
        for key in ("transaction", "message"):
            if isinstance(event.get(key), str):
                event[key] = scrub_identifiers(event[key])
        return event

    sentry_sdk.init(
        dsn=sentry_settings.sentry_dsn,
        environment=sentry_settings.environment,
        release=sentry_settings.commit_tag,
        traces_sample_rate=0,
        send_default_pii=False,
        before_send=sentry_before_send,
    )

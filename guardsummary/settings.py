import logging

from dynaconf import Dynaconf

logger = logging.getLogger(__name__)

DEFAULT_RULES_FILE = "rules"
DEFAULT_DATA_FILE = "data"
DEFAULT_SHOW_SUMMARY = "fail"


settings = Dynaconf(
    includes=["settings.toml"],
    load_dotenv=True,
    merge_enabled=True,
    envvar_prefix="GUARD_SUMMARY",
)


def get_default_labels() -> tuple[str, str]:
    """
    Return the (rules file label, data file label) pair used when the CLI is
    not given explicit labels.

    Both can be set in settings.toml or through the GUARD_SUMMARY_RULES_FILE
    and GUARD_SUMMARY_DATA_FILE environment variables.
    """
    rules_file = settings.get("RULES_FILE", DEFAULT_RULES_FILE)
    data_file = settings.get("DATA_FILE", DEFAULT_DATA_FILE)
    return str(rules_file), str(data_file)


def get_default_show_summary() -> list[str]:
    """
    Return the configured summary categories as a list of names.

    SHOW_SUMMARY may be a comma separated string or a list in settings.toml.
    """
    value = settings.get("SHOW_SUMMARY", DEFAULT_SHOW_SUMMARY)
    if isinstance(value, str):
        return [value]
    return [str(v) for v in value]


"""Configuration for faviconurl"""

from pathlib import Path

from dynaconf import Dynaconf, Validator

# Validators for faviconurl settings.
_validators = [
    Validator("logging.format", is_in=["mozlog", "pretty"]),
    Validator("logging.level", is_in=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
    Validator("logging.can_propagate", is_type_of=bool),
    Validator("http.timeout_sec", is_type_of=(int, float), gt=0, must_exist=True),
    # Upper bound on redirect hops per fetch.
    Validator("http.max_redirects", is_type_of=int, gte=0, lte=50, must_exist=True),
]

# `root_path` = The package directory, so settings load from any working directory.
# `envvar_prefix` = Export envvars with `export FAVICONURL_FOO=bar`.
# `settings_files` = Load these files in the order.
# `environments` = Enable layered environments such as `development`, `testing` etc.
# `env_switcher` = Switch environments by `export FAVICONURL_ENV=testing`. Default: `development`.
# `merge_enabled` = Environment tables extend `[default]` instead of replacing it.
# `validators` = Define validators for faviconurl settings.

settings = Dynaconf(
    root_path=str(Path(__file__).parent),
    envvar_prefix="FAVICONURL",
    settings_files=[
        "configs/default.toml",
        "configs/development.toml",
        "configs/production.toml",
        "configs/testing.toml",
    ],
    environments=True,
    env_switcher="FAVICONURL_ENV",
    merge_enabled=True,
    validators=_validators,
)

"""Simple entrypoint to run the clothing advisor locally against the sample scenarios."""

from babyweather_app.config import AdvisorConfig
from babyweather_app.logging_config import configure_logging
from evaluation.harness import run_smoke_checks


def main() -> None:
    config = AdvisorConfig.from_env()
    configure_logging(config.log_level)
    for line in run_smoke_checks():
        print(line)


if __name__ == "__main__":
    main()

import sys

from txdoctor.cli.commands import run
from txdoctor.config.settings import Settings
from txdoctor.logging.logger import Log


def main() -> None:
    """Entry point: load settings -> configure logging -> dispatch CLI."""
    settings = Settings()
    Log.configure(settings.log_level)
    sys.exit(run(sys.argv[1:], settings))


if __name__ == "__main__":
    main()

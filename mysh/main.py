import argparse
import sys

from mysh import config, shell
from mysh.logger import logger_helper


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="mysh", description="a minimal interactive shell"
    )
    parser.add_argument(
        "--log", type=str.upper, default=config.LOG_LEVEL, choices=logger_helper.LEVELS,
        help="lowest log level echoed to stderr",
    )
    parser.add_argument("--log-dir", default=config.LOG_DIR, help="directory of the debug log")
    parser.add_argument("--prompt", default=config.PROMPT, help="prompt text")
    parser.add_argument(
        "--no-banner", action="store_true", default=False, help="don't print the welcome banner"
    )
    parser.add_argument("-c", dest="command", help="run COMMAND and exit with its status")

    args = parser.parse_args(argv)
    logger_helper.configure(args.log, args.log_dir)

    sh = shell.Shell(prompt=args.prompt, banner="" if args.no_banner else None)
    if args.command is not None:
        return sh.execute(args.command) or 0
    return sh.loop()


if __name__ == "__main__":
    sys.exit(main())

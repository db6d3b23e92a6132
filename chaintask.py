import logging
import os
import sys

from config import CONFIG, UnknownNetworkError, get_network
from tools.signers import InvalidPrivateKeyError
from tools.tasks import TASKS, UnknownTaskError, run_task


def print_usage(prog):
    print(f"[x] Usage: python {prog} [--network <name>] <task>")
    print("Available tasks:")
    for name, registered in sorted(TASKS.items()):
        print(f"  {name:<10} {registered.description}")


def configure_logging():
    level = os.getenv("LOG_LEVEL", "WARNING").upper()
    if not isinstance(logging.getLevelName(level), int):
        print(f"[!] Unknown LOG_LEVEL {level}, using WARNING")
        level = "WARNING"
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def parse_args(args):
    """Split `--network <name>` (accepted before or after the task) from the positional arguments."""
    network_name = None
    positional = []
    i = 0
    while i < len(args):
        if args[i] == "--network":
            if i + 1 >= len(args):
                return None, None
            network_name = args[i + 1]
            i += 2
            continue
        positional.append(args[i])
        i += 1
    return network_name, positional


def main(argv=None, config=None):
    argv = sys.argv if argv is None else argv
    config = CONFIG if config is None else config

    configure_logging()

    prog = os.path.basename(argv[0])
    network_name, positional = parse_args(list(argv[1:]))
    if positional is None or len(positional) != 1:
        print_usage(prog)
        return 1
    task_name = positional[0].strip()

    try:
        network = get_network(config, network_name)
        run_task(task_name, network=network)
    except (UnknownNetworkError, UnknownTaskError, InvalidPrivateKeyError) as e:
        print(f"[x] {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

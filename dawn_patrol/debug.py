# ABOUTME: Debug logging helper controlled by the DEBUG environment variable
# ABOUTME: Prints tagged lines to stdout so container logs pick them up

from dawn_patrol.config import Config


def debug_log(message: str, tag: str = "DEBUG") -> None:
    """Print a tagged debug line when Config.DEBUG is enabled"""
    if Config.DEBUG:
        print(f"[{tag}] {message}", flush=True)

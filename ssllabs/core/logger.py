from typing import Callable

Logger = Callable[[str], None]

def create_logger(prefix: str) -> Logger:
    """Return a log function that prints messages tagged with `prefix`."""
    def log(message: str) -> None:
        print(f"[{prefix}] {message}")

    return log

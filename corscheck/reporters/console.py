import json
from datetime import datetime
from typing import Iterable

from colorama import init as colorama_init, Fore, Style

from corscheck.core.models import Category, CORSResult
colorama_init(autoreset=True)


BANNER = r"""  ____ ___  ____  ____       _               _
 / ___/ _ \|  _ \/ ___|  ___| |__   ___  ___| | _____ _ __
| |  | | | | |_) \___ \ / __| '_ \ / _ \/ __| |/ / _ \ '__|
| |__| |_| |  _ < ___) | (__| | | |  __/ (__|   <  __/ |
 \____\___/|_| \_\____/ \___|_| |_|\___|\___|_|\_\___|_|
"""

_CATEGORY_COLORS = {
    Category.WILDCARD: Fore.RED,
    Category.NULL_ORIGIN: Fore.RED,
    Category.DIFFERENT_DOMAIN: Fore.RED,
    Category.SAME_DOMAIN: Fore.YELLOW,
}


class Log:
    def __init__(self, verbose: int = 1):
        self.verbose = verbose
        self.PAY = Fore.MAGENTA

    def _time(self):
        return datetime.now().strftime("[%H:%M:%S]")

    def _fmt(self, level: str, color: str):
        return f"{self._time()} {color}[{level}]{Style.RESET_ALL}"

    def info(self, msg: str):
        if self.verbose >= 1:
            print(f"{self._fmt('INFO', Fore.CYAN)} {msg}")

    def warn(self, msg: str):
        if self.verbose >= 0:
            print(f"{self._fmt('WARNING', Fore.YELLOW)} {msg}")

    def ok(self, msg: str):
        print(f"{self._fmt('SUCCESS', Fore.GREEN)} {msg}")

    def fail(self, msg: str):
        print(f"{self._fmt('FAIL', Fore.RED)} {msg}")

    def debug(self, msg: str):
        if self.verbose >= 2:
            print(f"{self._fmt('DEBUG', Fore.MAGENTA)} {msg}")

    def banner(self):
        if self.verbose >= 1:
            print(f"{Fore.CYAN}{BANNER}{Style.RESET_ALL}")

    def result(self, result: CORSResult):
        col = _CATEGORY_COLORS.get(result.category, Fore.WHITE)
        label = result.category.name if result.category else "UNKNOWN"
        print(f"{self._fmt('VULNERABLE', col)} {label} {self.PAY}{result.url}"
              f"{Style.RESET_ALL} {Style.DIM}(HTTP {result.status_code}){Style.RESET_ALL}")
        if self.verbose >= 1:
            print(json.dumps(result.to_dict(), indent=2))

    def saved(self, paths: Iterable):
        self.ok("Results are saved in the files below:")
        for p in paths:
            print(f"\t{p}")

    def nothing_found(self):
        self.fail("No misconfigured origins found. Better luck next time...")

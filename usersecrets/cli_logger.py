import contextlib
import datetime
import os
import sys
import traceback
from colorama import Fore, Style, init

# Initialize Colorama
init(autoreset=True)

LOG_DIR = os.path.join(os.path.expanduser("~"), ".usersecrets", "logs")
with contextlib.suppress(OSError):
    os.makedirs(LOG_DIR, exist_ok=True)

class Logger:
    """Console + file reporter. None of its methods raise."""

    def __init__(self, verbose_enabled=False):
        self.verbose_enabled = verbose_enabled
        self.log_file = os.path.join(
            LOG_DIR,
            f"usersecrets_{datetime.datetime.now().strftime('%Y%m%d_%H%M%S')}.log"
        )

    def _get_timestamp(self):
        return datetime.datetime.now().strftime("%H:%M:%S")

    def _write(self, log_message):
        # a broken log directory must never break the command itself
        with contextlib.suppress(OSError):
            with open(self.log_file, "a") as f:
                f.write(log_message)

    def _log(self, level, message, color, err=False, prefix="", echo=True):
        timestamp = self._get_timestamp()
        if echo:
            print(f"{color}{Style.BRIGHT}[{timestamp}]{Style.RESET_ALL} {prefix}{message}{Style.RESET_ALL}",
                  file=sys.stderr if err else sys.stdout)
        self._write(f"[{timestamp}] [{level}] {message}\n")

    def info(self, message):
        self._log("INFO", message, Fore.CYAN)

    def success(self, message):
        self._log("SUCCESS", message, Fore.GREEN, prefix=f"{Style.BRIGHT}✓ {Style.RESET_ALL}{Fore.GREEN}")

    def warning(self, message):
        self._log("WARNING", message, Fore.YELLOW, err=True,
                  prefix=f"{Style.BRIGHT}⚠ {Style.RESET_ALL}{Fore.YELLOW}")

    def error(self, message):
        self._log("ERROR", message, Fore.RED, err=True,
                  prefix=f"{Style.BRIGHT}✖ {Style.RESET_ALL}{Fore.RED}")

    def debug(self, message):
        self._log("DEBUG", message, Fore.WHITE + Style.DIM)

    def verbose(self, message):
        """Diagnostics shown only with --verbose; always kept in the log file."""
        if not message:
            return
        self._log("VERBOSE", message.rstrip(), Fore.WHITE + Style.DIM,
                  err=True, echo=self.verbose_enabled)

    # -------- Exception logging --------
    def exception(self, exc_type, exc_value, exc_traceback):
        """Write the traceback to the log file only."""
        formatted_lines = traceback.format_exception(exc_type, exc_value, exc_traceback)
        for line in formatted_lines:
            for sub_line in line.splitlines():
                if sub_line.strip():
                    self._log("TRACEBACK", f">> {sub_line}", Fore.RED, err=True, echo=False)


# ---------------- Helper ----------------
logger = Logger()

def get_latest_log_file():
    """Return the path to the latest log file."""
    if not os.path.isdir(LOG_DIR):
        return None
    log_files = [os.path.join(LOG_DIR, f) for f in os.listdir(LOG_DIR) if f.endswith(".log")]
    if not log_files:
        return None
    return max(log_files, key=os.path.getctime)

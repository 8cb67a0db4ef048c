"""FutureBuddy Desktop - 桌面应用外壳"""

from futurebuddy_desktop.config import APP_NAME
from futurebuddy_desktop.runtime import run

__all__ = ["APP_NAME", "run"]

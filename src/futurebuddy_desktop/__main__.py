"""桌面入口: python -m futurebuddy_desktop"""

from futurebuddy_desktop.runtime import run
from futurebuddy_desktop.target import BuildTarget, current_target
from futurebuddy_desktop.telemetry import setup_logging


def main() -> None:
    """入口函数"""
    target = current_target()
    if target is not BuildTarget.DESKTOP:
        raise SystemExit(f"desktop entry point is not available in a {target.value} build")
    setup_logging()
    run()


if __name__ == "__main__":
    main()

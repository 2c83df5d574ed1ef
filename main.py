# main.py

from subprocess import run
from sys import executable

from app import app
from app.configs import settings

__all__ = ["app"]


def start(cmmd: list[str]) -> None:
    run(cmmd, check=True)


def main() -> None:
    cmmd = [
        executable,
        "-m",
        "uvicorn",
        "app:app",
        "--host",
        "0.0.0.0",
        "--port",
        f"{settings.PORT}",
        "--log-level",
        "debug" if settings.DEBUG else "info",
        "--loop",
        "uvloop",
        "--http",
        "httptools",
        "--timeout-graceful-shutdown",
        "5",
    ]
    start(cmmd)


if __name__ == "__main__":
    main()

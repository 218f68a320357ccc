import argparse
import errno
import socket
import sys
from typing import Optional, Sequence, Tuple

import uvicorn

from app.config import ConfigError, check_port, load_settings
from app.main import create_app
from app.utils.logger import logger

# Extra ports tried after the configured one is taken
PORT_RETRIES = 5


class ListenError(RuntimeError):
    pass


def _bind(host: str, port: int) -> socket.socket:
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    try:
        sock.bind((host, port))
    except (OSError, OverflowError):
        sock.close()
        raise
    return sock


def bind_with_fallback(host: str, port: int, retries: int = PORT_RETRIES) -> Tuple[socket.socket, int]:
    """
    Bind `port`, moving to the next one while it is already in use.
    Gives up after `retries` extra attempts or on any other bind error.
    """
    current = port
    for attempt in range(retries + 1):
        try:
            return _bind(host, current), current
        except OverflowError as e:
            raise ListenError(f"Cannot listen on {host}:{current}: {e}") from e
        except OSError as e:
            if e.errno != errno.EADDRINUSE:
                raise ListenError(f"Cannot listen on {host}:{current}: {e}") from e
            if attempt == retries:
                raise ListenError(
                    f"Ports {port}-{current} are all in use"
                ) from e

            logger.warning(f"[SERVER] Port {current} busy. Trying {current + 1}...")
            current += 1

    raise ListenError(f"Cannot listen on {host}:{port}")


def _port_arg(value: str) -> int:
    try:
        return check_port(int(value))
    except (ValueError, ConfigError) as e:
        raise argparse.ArgumentTypeError(str(e))


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Grammar tutor API server")
    parser.add_argument(
        "--host",
        default=None,
        help="Host interface to bind the API server (overrides HOST).",
    )
    parser.add_argument(
        "--port",
        type=_port_arg,
        default=None,
        help="First port to try (overrides PORT).",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)

    try:
        settings = load_settings()
    except ConfigError as e:
        logger.error(f"[CONFIG] {e}")
        sys.exit(1)

    overrides = {}
    if args.host:
        overrides["host"] = args.host
    if args.port is not None:
        overrides["port"] = args.port
    if overrides:
        settings = settings.model_copy(update=overrides)

    app = create_app(settings)

    try:
        sock, port = bind_with_fallback(settings.host, settings.port)
    except ListenError as e:
        logger.error(f"[SERVER] Listen error: {e}")
        sys.exit(1)

    logger.info(f"[SERVER] Tutor running on http://localhost:{port}")

    config = uvicorn.Config(app, host=settings.host, port=port, log_level="info")
    uvicorn.Server(config).run(sockets=[sock])


if __name__ == "__main__":
    main()

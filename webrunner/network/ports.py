"""Free TCP port lookup for the test runner's server."""

import asyncio
import socket

DEFAULT_PORT = 8000
MAX_PORT = 65535


async def find_free_port(
    preferred: int = DEFAULT_PORT,
    host: str = "localhost",
    max_port: int = MAX_PORT,
) -> int:
    """Find the first free TCP port at or above ``preferred``.

    Args:
        preferred: Port to try first.
        host: Host to bind on while probing.
        max_port: Highest port to try.

    Returns:
        A port that could be bound.

    Raises:
        OSError: If no port in the range is free.
    """
    return await asyncio.to_thread(_find_free_port, preferred, host, max_port)


def _find_free_port(preferred: int, host: str, max_port: int) -> int:
    for port in range(preferred, max_port + 1):
        if _is_port_free(host, port):
            return port
    raise OSError(f"No free port found between {preferred} and {max_port} on {host}")


def _is_port_free(host: str, port: int) -> bool:
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    try:
        sock.bind((host, port))
    except OSError:
        return False
    finally:
        sock.close()
    return True
